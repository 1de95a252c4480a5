#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Intersection courbe/courbe par Bezier clipping.

A chaque niveau de recursion, les deux sous-courbes sont clippees
alternativement par la fat line de l'autre (au plus MAX_ITERATIONS
fois). La boucle se termine par un des signaux :

- NO_OVERLAP : les enveloppes ne se recouvrent pas, branche elaguee
- HIT : les deux intervalles sont sous la tolerance
- SPLIT_BOTH : le clipping stagne des deux cotes, on coupe A et B
- SPLIT_A / SPLIT_B : le clipping stagne d'un cote, on coupe une courbe

Usage::

    result = intersect_curve_curve(points_a, points_b)
    for t, s in result:
        ...

@author: Nervures
@date: 2026-10
"""

import logging

from .clipconfig import clip_params
from .fatline import hull_clip
from .results import IntersectionAccumulator
from .subdivision import Subcurve, validate_control_points, validate_weights

logger = logging.getLogger(__name__)

NO_OVERLAP = 0
HIT = 1
SPLIT_BOTH = -1
SPLIT_A = -2
SPLIT_B = -3


def clip_overlap(curve_a, curve_b, params, acc):
    """Boucle de clipping alterne sur une paire de sous-courbes.

    Les deux sous-courbes sont modifiees en place (polygone et intervalle).

    :param curve_a: sous-courbe A
    :type curve_a: Subcurve
    :param curve_b: sous-courbe B
    :type curve_b: Subcurve
    :param params: parametres du moteur (voir clipconfig)
    :type params: dict
    :param acc: accumulateur (compteurs, observateur)
    :type acc: IntersectionAccumulator
    :returns: NO_OVERLAP, HIT, SPLIT_BOTH, SPLIT_A ou SPLIT_B
    :rtype: int
    """
    tol = params['TOLERANCE']
    zero = params['ZERO']
    cross = params['CROSS_CLIP']
    stall_both = params['STALL_BOTH']
    stall_single = params['STALL_SINGLE']
    progress_low = params['PROGRESS_LOW']
    progress_high = params['PROGRESS_HIGH']

    for icount in range(params['MAX_ITERATIONS']):
        # B est clippee par la fat line de A
        clip_b = hull_clip(curve_a.points, curve_b.points, zero, cross)
        if clip_b is None:
            return NO_OVERLAP
        b_width = curve_b.width * clip_b.width
        if b_width < tol and curve_a.width <= tol:
            curve_b.trim(clip_b.low, clip_b.high, zero)
            return HIT
        if clip_b.low > progress_low or clip_b.high < progress_high:
            curve_b.trim(clip_b.low, clip_b.high, zero)
            acc.clipped('B', curve_b)

        # A est clippee par la fat line de B
        clip_a = hull_clip(curve_b.points, curve_a.points, zero, cross)
        if clip_a is None:
            return NO_OVERLAP
        logger.debug("Iteration %d : B garde %.4f, A garde %.4f",
                     icount, clip_b.width, clip_a.width)

        if clip_b.width > stall_both and clip_a.width > stall_both:
            return SPLIT_BOTH
        if clip_a.width > stall_single and curve_a.width > tol:
            return SPLIT_A
        curve_a.trim(clip_a.low, clip_a.high, zero)
        if clip_b.width > stall_single and icount > 0:
            acc.clipped('A', curve_a)
            return SPLIT_B
        if curve_a.width <= tol and curve_b.width < tol:
            return HIT
        acc.clipped('A', curve_a)

    return SPLIT_BOTH


def _split_choice(signal, curve_a, curve_b, tol):
    """Courbes a couper pour un signal donne.

    Une sous-courbe deja sous la tolerance n'est jamais coupee ; si le
    signal ne designe qu'elle, l'autre est coupee a sa place.

    :returns: (couper A, couper B)
    :rtype: tuple(bool, bool)
    """
    want_a = signal in (SPLIT_BOTH, SPLIT_A)
    want_b = signal in (SPLIT_BOTH, SPLIT_B)
    can_a = curve_a.width > tol
    can_b = curve_b.width > tol
    return (can_a and (want_a or not can_b),
            can_b and (want_b or not can_a))


def recurse_overlap(curve_a, curve_b, params, acc, depth=0):
    """Recursion de subdivision sur une paire de sous-courbes.

    Les intersections sont ajoutees a ``acc`` dans l'ordre de parcours :
    gauche avant droite, A avant B.

    :param curve_a: sous-courbe A (possedee par cet appel)
    :type curve_a: Subcurve
    :param curve_b: sous-courbe B (possedee par cet appel)
    :type curve_b: Subcurve
    :param params: parametres du moteur
    :type params: dict
    :param acc: accumulateur partage
    :type acc: IntersectionAccumulator
    :param depth: profondeur de subdivision courante
    :type depth: int
    """
    if acc.done:
        return
    signal = clip_overlap(curve_a, curve_b, params, acc)
    if signal == NO_OVERLAP:
        return
    if signal == HIT:
        acc.add((curve_a.midpoint, curve_b.midpoint))
        return

    split_a, split_b = _split_choice(signal, curve_a, curve_b,
                                     params['TOLERANCE'])
    if not (split_a or split_b):
        acc.add((curve_a.midpoint, curve_b.midpoint))
        return
    if depth >= params['MAX_DEPTH']:
        acc.give_up("profondeur maximale %d atteinte sur %r x %r"
                    % (depth, curve_a, curve_b))
        return
    if acc.n_split >= params['MAX_SPLITS']:
        acc.give_up("%d subdivisions effectuees" % acc.n_split)
        return

    parts_a = curve_a.split() if split_a else (curve_a,)
    parts_b = curve_b.split() if split_b else (curve_b,)
    acc.split(int(split_a) + int(split_b))
    for sub_a in parts_a:
        for sub_b in parts_b:
            recurse_overlap(sub_a.copy(), sub_b.copy(), params, acc,
                            depth + 1)
            if acc.done:
                return


def intersect_curve_curve(points_a, points_b, single_hit=False,
                          weights_a=None, weights_b=None, params=None,
                          observer=None, strict=False):
    """Intersections de deux courbes de Bezier planes.

    :param points_a: points de controle de A, shape (m+1, 2)
    :type points_a: numpy.ndarray or list
    :param points_b: points de controle de B, shape (n+1, 2)
    :type points_b: numpy.ndarray or list
    :param single_hit: s'arreter a la premiere intersection
    :type single_hit: bool
    :param weights_a: poids de A (None ou tous egaux a 1)
    :param weights_b: poids de B (None ou tous egaux a 1)
    :param params: surcharges des parametres (voir clipconfig)
    :type params: dict or None
    :param observer: observateur des clippings intermediaires
    :type observer: AbstractClipObserver or None
    :param strict: lever ConvergenceError si le calcul n'a pas converge
    :type strict: bool
    :returns: couples (t, s) dans l'ordre de parcours
    :rtype: IntersectionResult
    :raises ValueError: polygones ou poids invalides
    :raises ConvergenceError: si strict et bornes de recursion atteintes
    """
    params = clip_params(params)
    pts_a = validate_control_points(points_a, params['MAX_DEGREE'])
    pts_b = validate_control_points(points_b, params['MAX_DEGREE'])
    validate_weights(weights_a, len(pts_a))
    validate_weights(weights_b, len(pts_b))

    logger.info("=== Intersection courbe/courbe (degres %d et %d) ===",
                len(pts_a) - 1, len(pts_b) - 1)
    acc = IntersectionAccumulator(max_records=params['MAX_INTERSECTIONS'],
                                  merge_distance=params['MERGE_DISTANCE'],
                                  single_hit=single_hit, observer=observer)
    recurse_overlap(Subcurve(pts_a), Subcurve(pts_b), params, acc)
    result = acc.result()
    logger.info("=== %d intersections (%s), %d subdivisions, "
                "%d clippings ===", len(result), result.status,
                result.n_split, result.n_clip)
    if strict:
        result.check()
    return result
