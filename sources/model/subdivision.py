#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Subdivision de polygones de controle de Bezier avec suivi du parametre.

Toutes les operations travaillent sur des ndarray de forme (n+1, 2)
(points de controle) ou (n+1,) (coefficients de Bernstein scalaires) :
les combinaisons lineaires portent sur le premier axe.

Un :class:`Subcurve` associe un polygone de controle a l'intervalle
[low, high] qu'il represente sur la courbe d'origine. Un point evalue
en u sur le polygone courant correspond au parametre global
t = low + u * (high - low).

@author: Nervures
@date: 2026-10
"""

import numpy as np


def validate_control_points(points, max_degree=None):
    """Convertit et verifie un polygone de controle.

    :param points: points de controle, shape (n+1, 2)
    :type points: numpy.ndarray or list
    :param max_degree: degre maximal accepte (None = pas de limite)
    :type max_degree: int or None
    :returns: copie des points en flottants
    :rtype: numpy.ndarray
    :raises ValueError: forme invalide, moins de 2 points, degre trop eleve
        ou coordonnees non finies
    """
    pts = np.array(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(
            "Les points de controle doivent former un tableau (*, 2), "
            "recu shape %s" % str(pts.shape))
    if len(pts) < 2:
        raise ValueError("Il faut au moins 2 points, recu %d" % len(pts))
    if max_degree is not None and len(pts) - 1 > max_degree:
        raise ValueError("Degre %d superieur au degre maximal %d"
                         % (len(pts) - 1, max_degree))
    if not np.all(np.isfinite(pts)):
        raise ValueError("Coordonnees non finies dans le polygone de controle")
    return pts


def validate_weights(weights, n_points):
    """Verifie les poids des points de controle.

    Seules les courbes polynomiales (poids unitaires) sont supportees.

    :param weights: poids ou None
    :param n_points: nombre de points de controle
    :type n_points: int
    :raises ValueError: nombre de poids incorrect ou poids non unitaire
    """
    if weights is None:
        return
    w = np.asarray(weights, dtype=float)
    if w.shape != (n_points,):
        raise ValueError("Il faut %d poids, recu shape %s"
                         % (n_points, str(w.shape)))
    if not np.allclose(w, 1.0):
        raise ValueError("Courbes rationnelles non supportees : "
                         "tous les poids doivent valoir 1")


def split_at(points, t):
    """Subdivision exacte de De Casteljau en t.

    :param points: polygone de controle (non modifie)
    :param t: parametre local de coupure
    :type t: float
    :returns: (left, right), polygones de meme degre couvrant
        respectivement [0, t] et [t, 1]
    :rtype: tuple(numpy.ndarray, numpy.ndarray)
    """
    pts = np.array(points, dtype=float)
    n = len(pts) - 1
    left = np.empty_like(pts)
    right = np.empty_like(pts)
    left[0] = pts[0]
    right[n] = pts[n]
    for r in range(1, n + 1):
        pts[:n - r + 1] = (1.0 - t) * pts[:n - r + 1] + t * pts[1:n - r + 2]
        left[r] = pts[0]
        right[n - r] = pts[n - r]
    return left, right


def trim_left(points, t):
    """Ne conserve que la portion [t, 1], en place.

    :param points: polygone de controle, modifie en place
    :type points: numpy.ndarray
    :param t: parametre local
    :returns: points
    """
    n = len(points) - 1
    for r in range(1, n + 1):
        points[:n - r + 1] = ((1.0 - t) * points[:n - r + 1]
                              + t * points[1:n - r + 2])
    return points


def trim_right(points, t):
    """Ne conserve que la portion [0, t], en place.

    :param points: polygone de controle, modifie en place
    :type points: numpy.ndarray
    :param t: parametre local
    :returns: points
    """
    n = len(points) - 1
    for r in range(1, n + 1):
        points[r:] = (1.0 - t) * points[r - 1:n] + t * points[r:]
    return points


def trim_to_interval(points, low, high, zero=1e-6):
    """Ne conserve que la portion [low, high], en place.

    Coupe a gauche en low, puis a droite au parametre reechelonne
    (high - low) / (1 - low). Si low est a moins de ``zero`` de 1,
    la seconde coupe est omise.

    :param points: polygone de controle, modifie en place
    :type points: numpy.ndarray
    :param low: borne basse locale
    :param high: borne haute locale
    :param zero: seuil de degenerescence
    :returns: points
    """
    if low > 0.0:
        trim_left(points, low)
    if 1.0 - low <= zero:
        return points
    rescaled = (high - low) / (1.0 - low)
    if rescaled < 1.0:
        trim_right(points, rescaled)
    return points


class Subcurve(object):
    """Polygone de controle et intervalle parametrique sur la courbe d'origine.

    Chaque frame de recursion possede ses propres instances : les
    operations de coupe modifient le polygone en place, les appels
    recursifs recoivent des copies.
    """

    def __init__(self, points, low=0.0, high=1.0):
        self.points = np.array(points, dtype=float)
        self.low = float(low)
        self.high = float(high)

    def __repr__(self):
        return "Subcurve(degre=%d, [%.6g, %.6g])" % (
            self.degree, self.low, self.high)

    @property
    def degree(self):
        return len(self.points) - 1

    @property
    def width(self):
        """Largeur de l'intervalle sur la courbe d'origine."""
        return self.high - self.low

    @property
    def midpoint(self):
        return 0.5 * (self.low + self.high)

    def copy(self):
        return Subcurve(self.points, self.low, self.high)

    def to_global(self, u):
        """Parametre global correspondant au parametre local u."""
        return self.low + u * (self.high - self.low)

    def trim(self, low, high, zero=1e-6):
        """Restreint la sous-courbe a [low, high] (parametres locaux).

        :returns: self (pour chainage)
        :rtype: Subcurve
        """
        new_low = self.to_global(low)
        new_high = self.to_global(high)
        trim_to_interval(self.points, low, high, zero)
        self.low, self.high = new_low, new_high
        return self

    def split(self, t=0.5):
        """Coupe en deux sous-courbes independantes au parametre local t.

        :returns: (gauche, droite)
        :rtype: tuple(Subcurve, Subcurve)
        """
        left, right = split_at(self.points, t)
        middle = self.to_global(t)
        return (Subcurve(left, self.low, middle),
                Subcurve(right, middle, self.high))
