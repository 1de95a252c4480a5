#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Courbe de Bezier 2D polynomiale de degre arbitraire.

Evaluation et subdivision par l'algorithme de De Casteljau, intersections
par Bezier clipping (voir overlap et curveline).

Creation::

    # Cubique (4 points de controle)
    a = Bezier([[0, 0], [100, 200], [300, 200], [400, 0]])
    b = Bezier([[0, 150], [400, 150]])

    # Evaluation
    pt = a.evaluate(0.5)                      # ndarray(2,)
    pts = a.evaluate([0, .25, .5, .75, 1])    # ndarray(5, 2)

    # Intersections
    for t, s in a.intersections(b):
        print(a.evaluate(t), b.evaluate(s))
    ts = a.line_intersections((0, 150), (1, 150))

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .curveline import intersect_curve_line
from .overlap import intersect_curve_curve
from .subdivision import split_at, trim_to_interval, validate_control_points

# --------------------------------------------------------------------------
#  Algorithme de De Casteljau (fonction utilitaire)
# --------------------------------------------------------------------------

def de_casteljau(points, t):
    """Evalue une courbe de Bezier en t par l'algorithme de De Casteljau.

    t peut sortir de [0, 1] : la courbe est alors extrapolee.

    :param points: points de controle, ndarray(n+1, 2)
    :param t: parametre scalaire ou array de parametres
    :returns: point ndarray(2,) si t scalaire, ndarray(m, 2) sinon
    :rtype: numpy.ndarray
    """
    t = np.asarray(t, dtype=float)
    scalar = t.ndim == 0
    tt = np.atleast_1d(t)[:, None, None]
    pts = np.repeat(np.asarray(points, dtype=float)[None], len(tt), axis=0)
    n = pts.shape[1] - 1
    for r in range(1, n + 1):
        pts[:, :n - r + 1] = ((1.0 - tt) * pts[:, :n - r + 1]
                              + tt * pts[:, 1:n - r + 2])
    if scalar:
        return pts[0, 0]
    return pts[:, 0]


# --------------------------------------------------------------------------
#  Classe Bezier
# --------------------------------------------------------------------------

class Bezier(object):
    """Courbe de Bezier 2D de degre arbitraire.

    Stockage des points de controle en coordonnees (x, y).
    Degre n = nombre de points de controle - 1.
    """

    def __init__(self, control_points, name='Sans nom'):
        """
        :param control_points: points de controle P0..Pn
        :type control_points: numpy.ndarray or list
        :param name: nom de la courbe
        :type name: str
        :raises ValueError: shape invalide, moins de 2 points ou
            coordonnees non finies
        """
        self._cpts = validate_control_points(control_points)
        self._name = name

    def __repr__(self):
        return "Bezier('%s', degre=%d, %d pts)" % (
            self._name, self.degree, len(self._cpts))

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def control_points(self):
        """Points de controle, ndarray(n+1, 2)."""
        return self._cpts

    @property
    def degree(self):
        """Degre de la courbe (n = nb_points - 1)."""
        return len(self._cpts) - 1

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = str(value)

    @property
    def start_cpoint(self):
        """Premier point de controle P0, ndarray(2,)."""
        return self._cpts[0].copy()

    @property
    def end_cpoint(self):
        """Dernier point de controle Pn, ndarray(2,)."""
        return self._cpts[-1].copy()

    # ------------------------------------------------------------------
    #  Evaluation et subdivision
    # ------------------------------------------------------------------

    def evaluate(self, t):
        """Evalue la courbe en t (De Casteljau).

        :param t: parametre, scalaire ou array (extrapolation hors [0, 1])
        :type t: float or numpy.ndarray
        :returns: point(s) sur la courbe
        :rtype: ndarray(2,) si t scalaire, ndarray(m, 2) si t array
        """
        return de_casteljau(self._cpts, t)

    def split(self, t=0.5):
        """Coupe la courbe en t.

        :param t: parametre de coupure dans [0, 1]
        :type t: float
        :returns: (gauche, droite), courbes couvrant [0, t] et [t, 1]
        :rtype: tuple(Bezier, Bezier)
        """
        if not 0.0 <= t <= 1.0:
            raise ValueError("t doit etre dans [0, 1], recu %g" % t)
        left, right = split_at(self._cpts, t)
        return (Bezier(left, name='%s[0,%g]' % (self._name, t)),
                Bezier(right, name='%s[%g,1]' % (self._name, t)))

    def segment(self, low, high):
        """Portion de la courbe sur [low, high], meme degre.

        :param low: borne basse dans [0, 1]
        :param high: borne haute dans [low, 1]
        :rtype: Bezier
        """
        if not 0.0 <= low <= high <= 1.0:
            raise ValueError("Intervalle [%g, %g] invalide" % (low, high))
        pts = trim_to_interval(self._cpts.copy(), low, high)
        return Bezier(pts, name='%s[%g,%g]' % (self._name, low, high))

    # ------------------------------------------------------------------
    #  Transformations
    # ------------------------------------------------------------------

    def translate(self, dx, dy):
        """Translation de la courbe.

        :param dx: deplacement en x
        :type dx: float
        :param dy: deplacement en y
        :type dy: float
        :returns: self (pour chainage)
        :rtype: Bezier
        """
        self._cpts[:, 0] += dx
        self._cpts[:, 1] += dy
        return self

    def reverse(self):
        """Inverse le parametrage de la courbe.

        t=0 devient t=1 et vice-versa : P0 <-> Pn, P1 <-> Pn-1, etc.

        :returns: self (pour chainage)
        :rtype: Bezier
        """
        self._cpts = self._cpts[::-1].copy()
        return self

    # ------------------------------------------------------------------
    #  Intersections
    # ------------------------------------------------------------------

    def intersections(self, other, single_hit=False, params=None,
                      observer=None, strict=False):
        """Intersections avec une autre courbe de Bezier.

        :param other: seconde courbe
        :type other: Bezier
        :returns: couples (t sur self, s sur other)
        :rtype: IntersectionResult
        """
        return intersect_curve_curve(self._cpts, other.control_points,
                                     single_hit=single_hit, params=params,
                                     observer=observer, strict=strict)

    def line_intersections(self, p0, p1, single_hit=False, params=None,
                           observer=None, strict=False):
        """Intersections avec la droite passant par p0 et p1.

        :returns: parametres t sur self
        :rtype: IntersectionResult
        """
        return intersect_curve_line(self._cpts, p0, p1,
                                    single_hit=single_hit, params=params,
                                    observer=observer, strict=strict)

    # ------------------------------------------------------------------
    #  Visualisation
    # ------------------------------------------------------------------

    def plot(self, ax=None, show=True, control_polygon=True, marks=None):
        """Trace la courbe de Bezier.

        :param ax: axes matplotlib existants (None = creation)
        :param show: appeler plt.show() a la fin
        :param control_polygon: afficher le polygone de controle
        :param marks: parametres t a marquer (ex: intersections)
        :returns: axes matplotlib
        """
        import matplotlib.pyplot as plt

        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(10, 6))

        pts = self.evaluate(np.linspace(0, 1, 200))
        ax.plot(pts[:, 0], pts[:, 1], 'b-', linewidth=1.5, label=self._name)

        if control_polygon:
            ax.plot(self._cpts[:, 0], self._cpts[:, 1],
                    'o--', color='gray', linewidth=0.8, markersize=4,
                    label='Polygone de controle')

        if marks is not None and len(marks) > 0:
            mp = self.evaluate(np.asarray(marks, dtype=float))
            ax.plot(mp[:, 0], mp[:, 1], 'rx', markersize=8,
                    label='Intersections')

        ax.set_aspect('equal')
        ax.set_title(self._name)
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=8)

        if show:
            plt.show()

        return ax


if __name__ == "__main__":
    a = Bezier([[0, 0], [150, 200], [250, 200], [400, 0]], name='Cubique')
    b = Bezier([[0, 120], [200, -40], [400, 120]], name='Parabole')
    res = a.intersections(b)
    print(res)
    for t, s in res:
        print("t=%.4f s=%.4f  %s  %s" % (t, s, a.evaluate(t), b.evaluate(s)))
    ax = a.plot(show=False, marks=[t for t, s in res])
    b.plot(ax=ax)
