#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Intersection courbe/droite par isolation des racines de Bernstein.

Les points de controle de la courbe sont projetes sur la normale
unitaire de la droite : les distances signees obtenues sont les
coefficients de Bernstein d'un polynome scalaire dont les racines
sont exactement les parametres d'intersection. Aucune fat line n'est
necessaire : la bande de la droite est d'epaisseur nulle.

Usage::

    result = intersect_curve_line(points, (0, 0), (10, 0))
    for t in result:
        ...

@author: Nervures
@date: 2026-10
"""

import math
import logging

import numpy as np

from .bernstein import isolate_interval
from .clipconfig import clip_params
from .results import IntersectionAccumulator
from .subdivision import Subcurve, validate_control_points

logger = logging.getLogger(__name__)

REJECT = 0
ROOT = 1
SPLIT = -1


def line_distances(points, p0, p1, zero=1e-6):
    """Distances signees des points a la droite (p0, p1).

    :param points: points de controle, shape (n+1, 2)
    :param p0: premier point de la droite
    :param p1: second point de la droite
    :param zero: longueur minimale de la droite
    :returns: coefficients de Bernstein de la distance, ndarray(n+1,)
    :rtype: numpy.ndarray
    :raises ValueError: si p0 et p1 sont confondus
    """
    p0 = np.asarray(p0, dtype=float)
    p1 = np.asarray(p1, dtype=float)
    a = p0[1] - p1[1]
    b = p1[0] - p0[0]
    length = math.hypot(a, b)
    if length < zero:
        raise ValueError("Droite degeneree : points (%g, %g) et (%g, %g) "
                         "confondus" % (p0[0], p0[1], p1[0], p1[1]))
    normal = np.array([a, b]) / length
    c = -normal.dot(p0)
    return np.asarray(points, dtype=float).dot(normal) + c


def converge(coeffs, params):
    """Clippe une fonction distance jusqu'a convergence ou stagnation.

    A chaque tour, l'intervalle est restreint a la zone ou l'enveloppe
    des coefficients peut s'annuler, puis les coefficients sont coupes
    a cet intervalle. Un intervalle assez etroit n'est une racine que si
    les coefficients coupes changent encore de signe.

    :param coeffs: coefficients et intervalle, modifies en place
    :type coeffs: Subcurve
    :param params: parametres du moteur
    :type params: dict
    :returns: (ROOT, t), (SPLIT, None) ou (REJECT, None)
    :rtype: tuple(int, float or None)
    """
    zero = params['ZERO']
    for _ in range(params['MAX_ROOT_ITERATIONS']):
        bounds = (0.0, 1.0)
        for cf in (coeffs.points, -coeffs.points):
            bounds = isolate_interval(cf, bounds, zero)
            if bounds is None:
                return REJECT, None
        low, high = bounds
        coeffs.trim(low, high, zero)
        if coeffs.width < params['TOLERANCE']:
            # enveloppe d'un seul cote de zero : la courbe ne touche pas
            cf = coeffs.points
            if cf.min() > zero or cf.max() < -zero:
                return REJECT, None
            return ROOT, coeffs.midpoint
        if low < params['PROGRESS_LOW'] and high > params['PROGRESS_HIGH']:
            return SPLIT, None
    return SPLIT, None


def find_roots(coeffs, params, acc, depth=0):
    """Cherche toutes les racines d'une fonction distance.

    Les racines sont ajoutees a ``acc``, gauche avant droite.

    :param coeffs: coefficients et intervalle (possedes par cet appel)
    :type coeffs: Subcurve
    :param params: parametres du moteur
    :type params: dict
    :param acc: accumulateur partage
    :type acc: IntersectionAccumulator
    :param depth: profondeur de subdivision courante
    :type depth: int
    """
    if acc.done:
        return
    status, t = converge(coeffs, params)
    acc.clipped('distance', coeffs)
    if status == ROOT:
        acc.add(t)
        return
    if status == REJECT:
        return
    if depth >= params['MAX_DEPTH']:
        acc.give_up("profondeur maximale %d atteinte sur %r"
                    % (depth, coeffs))
        return
    if acc.n_split >= params['MAX_SPLITS']:
        acc.give_up("%d subdivisions effectuees" % acc.n_split)
        return

    acc.split()
    for half in coeffs.split():
        find_roots(half, params, acc, depth + 1)
        if acc.done:
            return


def intersect_curve_line(points, line_p0, line_p1, single_hit=False,
                         params=None, observer=None, strict=False):
    """Intersections d'une courbe de Bezier et d'une droite.

    La droite est infinie : seuls les parametres de la courbe, dans
    [0, 1], sont rapportes.

    :param points: points de controle de la courbe, shape (n+1, 2)
    :type points: numpy.ndarray or list
    :param line_p0: premier point de la droite
    :param line_p1: second point de la droite
    :param single_hit: s'arreter a la premiere racine
    :type single_hit: bool
    :param params: surcharges des parametres (voir clipconfig)
    :type params: dict or None
    :param observer: observateur (recoit les coefficients clippes)
    :type observer: AbstractClipObserver or None
    :param strict: lever ConvergenceError si le calcul n'a pas converge
    :type strict: bool
    :returns: parametres t sur la courbe, dans l'ordre de parcours
    :rtype: IntersectionResult
    :raises ValueError: polygone invalide ou droite degeneree
    """
    params = clip_params(params)
    pts = validate_control_points(points, params['MAX_DEGREE'])
    coeffs = line_distances(pts, line_p0, line_p1, params['ZERO'])

    logger.info("=== Intersection courbe/droite (degre %d) ===",
                len(pts) - 1)
    acc = IntersectionAccumulator(max_records=params['MAX_INTERSECTIONS'],
                                  merge_distance=params['MERGE_DISTANCE'],
                                  single_hit=single_hit, observer=observer)
    find_roots(Subcurve(coeffs), params, acc)
    result = acc.result()
    logger.info("=== %d racines (%s), %d subdivisions ===",
                len(result), result.status, result.n_split)
    if strict:
        result.check()
    return result
