#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Isolation des racines d'un polynome de Bernstein scalaire.

Les coefficients c_0..c_n sont vus comme les ordonnees des points
(i/n, c_i). Par la propriete d'enveloppe convexe, la fonction ne peut
etre positive que la ou l'enveloppe de ces points coupe le demi-plan
c >= 0. Un coefficient est considere "interieur" s'il vaut au moins
``-zero``.

Le croisement entre les coefficients i et j est estime par :

    t = (i + c_i / (c_i - c_j) * (j - i)) / n

@author: Nervures
@date: 2026-10
"""

# Marge sur la comparaison avec les bornes courantes
BOUND_SLACK = 1e-6


def _crossing(cf, i, j, span):
    """Abscisse ou le segment (i, c_i)-(j, c_j) coupe l'axe.

    c_i est exterieur (< 0), c_j interieur (ramene a 0 s'il est negatif).
    """
    ci = cf[i]
    cj = max(cf[j], 0.0)
    return (i + ci / (ci - cj) * (j - i)) * span


def _first_entry(cf, inside, span):
    """Plus petite abscisse ou l'enveloppe atteint c >= 0."""
    n = len(cf) - 1
    tmin = 1.0
    for i in range(n + 1):
        if inside[i]:
            tmin = min(tmin, i * span)
            break
        for j in range(i + 1, n + 1):
            if inside[j]:
                tmin = min(tmin, _crossing(cf, i, j, span))
    return tmin


def _last_exit(cf, inside, span):
    """Plus grande abscisse ou l'enveloppe atteint c >= 0."""
    n = len(cf) - 1
    tmax = 0.0
    for j in range(n, -1, -1):
        if inside[j]:
            tmax = max(tmax, j * span)
            break
        for i in range(j - 1, -1, -1):
            if inside[i]:
                tmax = max(tmax, _crossing(cf, j, i, span))
    return tmax


def isolate_interval(coeffs, bounds=(0.0, 1.0), zero=1e-6):
    """Restreint un intervalle a la zone ou la fonction peut etre >= 0.

    Quatre cas selon le signe des coefficients extremes :

    - (+ ... +) : pas de coupe, intervalle inchange
    - (+ ... -) : coupe a droite, [low, tmax]
    - (- ... +) : coupe a gauche, [tmin, high]
    - (- ... -) : coupe des deux cotes, [tmin, tmax] (necessite au moins
      un coefficient interieur positif)

    :param coeffs: coefficients de Bernstein c_0..c_n
    :type coeffs: numpy.ndarray or list
    :param bounds: intervalle courant (low, high), dans [0, 1]
    :type bounds: tuple(float, float)
    :param zero: tolerance de signe
    :type zero: float
    :returns: intervalle restreint (low, high), ou None si aucun
        zero n'est possible dans l'intervalle (rejet)
    :rtype: tuple(float, float) or None
    """
    cf = [float(c) for c in coeffs]
    n = len(cf) - 1
    low, high = bounds
    inside = [c >= -zero for c in cf]
    if not any(inside):
        return None
    if n == 0 or (inside[0] and inside[n]):
        return low, high

    span = 1.0 / n
    if not inside[0]:
        tmin = _first_entry(cf, inside, span)
        if high < tmin - BOUND_SLACK:
            return None
        low = max(low, tmin)
    if not inside[n]:
        tmax = _last_exit(cf, inside, span)
        if low > tmax + BOUND_SLACK:
            return None
        high = min(high, tmax)
    if high < low:
        high = low
    return low, high
