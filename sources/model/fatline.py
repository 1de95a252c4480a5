#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Fat line et clipping d'une courbe par l'enveloppe d'une autre.

La fat line d'un polygone de controle est une bande definie par une
normale unitaire (a, b), issue de la corde P0-Pn, et un intervalle
d'offsets [cmin, cmax] : tout le polygone est compris entre les droites
a*x + b*y + cmin = 0 et a*x + b*y + cmax = 0.

Le clipping calcule, pour les points de controle de l'autre courbe,
les distances signees aux bords de la bande (polynomes de Bernstein)
et garde le sous-intervalle ou la courbe peut etre dans la bande.
Si la coupe selon la normale est insuffisante, une seconde bande
selon l'axe perpendiculaire (etendue propre de la courbe le long de
sa corde) est appliquee.

@author: Nervures
@date: 2026-10
"""

import math
import logging

import numpy as np

from .bernstein import isolate_interval

logger = logging.getLogger(__name__)


def _unit(vector, zero):
    """Vecteur unitaire, ou None si la norme est inferieure a zero."""
    norm = math.hypot(vector[0], vector[1])
    if norm < zero:
        return None
    return np.asarray(vector, dtype=float) / norm


class FatLine(object):
    """Bande englobante d'un polygone de controle."""

    def __init__(self, normal, cmin, cmax, emin, emax, degenerate=False):
        """
        :param normal: normale unitaire (a, b)
        :type normal: numpy.ndarray
        :param cmin: offset de la droite a*x + b*y + cmin = 0
        :param cmax: offset de la droite a*x + b*y + cmax = 0 (cmin <= cmax)
        :param emin: projection minimale sur l'axe perpendiculaire
        :param emax: projection maximale sur l'axe perpendiculaire
        :param degenerate: polygone reduit a un point, la normale ne vient
            pas de sa propre geometrie
        """
        self.normal = normal
        self.cmin = cmin
        self.cmax = cmax
        self.emin = emin
        self.emax = emax
        self.degenerate = degenerate

    def __repr__(self):
        return "FatLine(normal=(%.4g, %.4g), c=[%.6g, %.6g])" % (
            self.normal[0], self.normal[1], self.cmin, self.cmax)

    @property
    def axis(self):
        """Axe perpendiculaire a la normale, (-b, a)."""
        return np.array([-self.normal[1], self.normal[0]])

    @property
    def thickness(self):
        return self.cmax - self.cmin

    @classmethod
    def around(cls, points, reference=None, zero=1e-6):
        """Construit la fat line d'un polygone de controle.

        La normale est perpendiculaire a la corde P0-Pn. Si la corde est
        degeneree, on prend la direction vers le point de controle le plus
        eloigne de P0, puis la corde de ``reference`` (la bande coupe alors
        cette courbe en travers), puis l'axe x.

        :param points: polygone de controle, ndarray(n+1, 2)
        :param reference: polygone de la courbe a clipper (optionnel)
        :param zero: seuil de degenerescence
        :rtype: FatLine
        """
        pts = np.asarray(points, dtype=float)
        normal = None
        chord = _unit(pts[-1] - pts[0], zero)
        if chord is None:
            offsets = pts - pts[0]
            far = offsets[np.argmax(np.hypot(offsets[:, 0], offsets[:, 1]))]
            chord = _unit(far, zero)
        if chord is not None:
            normal = np.array([-chord[1], chord[0]])
        elif reference is not None:
            ref = np.asarray(reference, dtype=float)
            normal = _unit(ref[-1] - ref[0], zero)
        if normal is None:
            logger.debug("Fat line degeneree : normale par defaut (1, 0)")
            normal = np.array([1.0, 0.0])

        d = pts.dot(normal)
        e = pts.dot(np.array([-normal[1], normal[0]]))
        return cls(normal, -float(d.max()), -float(d.min()),
                   float(e.min()), float(e.max()), degenerate=chord is None)

    def distance_functions(self, points):
        """Distances signees des points aux deux bords de la bande.

        Positives a l'interieur de la bande.

        :returns: (distance au bord cmax, distance au bord cmin)
        :rtype: tuple(numpy.ndarray, numpy.ndarray)
        """
        d = np.asarray(points, dtype=float).dot(self.normal)
        return d + self.cmax, -(d + self.cmin)

    def axis_functions(self, points):
        """Distances signees aux bords de la bande perpendiculaire."""
        e = np.asarray(points, dtype=float).dot(self.axis)
        return e - self.emin, self.emax - e


class ClipInterval(object):
    """Sous-intervalle local [low, high] conserve par un clipping."""

    __slots__ = ('low', 'high')

    def __init__(self, low, high):
        self.low = low
        self.high = high

    def __repr__(self):
        return "ClipInterval(%.6g, %.6g)" % (self.low, self.high)

    def __iter__(self):
        return iter((self.low, self.high))

    @property
    def width(self):
        return self.high - self.low


def hull_clip(bound_points, clipped_points, zero=1e-6, cross_clip=0.5):
    """Clippe une courbe par la fat line d'une autre.

    :param bound_points: polygone dont on construit la fat line
    :param clipped_points: polygone de la courbe a clipper
    :param zero: tolerance de signe et de degenerescence
    :type zero: float
    :param cross_clip: si l'intervalle conserve apres la bande normale est
        au moins aussi large, la bande perpendiculaire est aussi appliquee
        (toujours appliquee si la fat line est degeneree)
    :type cross_clip: float
    :returns: intervalle local conserve, ou None si les enveloppes
        ne se recouvrent pas
    :rtype: ClipInterval or None
    """
    fat = FatLine.around(bound_points, reference=clipped_points, zero=zero)
    bounds = (0.0, 1.0)
    for cf in fat.distance_functions(clipped_points):
        bounds = isolate_interval(cf, bounds, zero)
        if bounds is None:
            return None

    if fat.degenerate or bounds[1] - bounds[0] >= cross_clip:
        for cf in fat.axis_functions(clipped_points):
            bounds = isolate_interval(cf, bounds, zero)
            if bounds is None:
                return None
    return ClipInterval(*bounds)
