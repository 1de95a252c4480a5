#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests de l'intersection courbe/droite.

Lance :
    python test_curveline.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import math
import unittest

import numpy as np

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.curveline import (REJECT, ROOT, SPLIT, converge,
                             intersect_curve_line, line_distances)
from model.clipconfig import clip_params
from model.bezier import de_casteljau
from model.results import (CONVERGED, TRUNCATED, ConvergenceError,
                           IntersectionResult)
from model.subdivision import Subcurve

PARABOLA = [[0, 0], [5, 10], [10, 0]]
# y(t) = 20 t (1 - t) = 2  =>  t = (1 -+ sqrt(0.6)) / 2
ROOTS = ((1 - math.sqrt(0.6)) / 2, (1 + math.sqrt(0.6)) / 2)


class TestLineDistances(unittest.TestCase):
    """Projection sur la normale de la droite."""

    def test_horizontal_line(self):
        cf = line_distances(PARABOLA, (0, 2), (3, 2))
        np.testing.assert_allclose(np.abs(cf), [2, 8, 2])
        self.assertTrue(cf[0] * cf[1] < 0)

    def test_unit_normal(self):
        """Les distances sont euclidiennes quelle que soit |p1 - p0|."""
        cf = line_distances([[0, 1], [0, -1]], (0, 0), (100, 100))
        np.testing.assert_allclose(np.abs(cf), [math.sqrt(0.5)] * 2)

    def test_degenerate_line_raises(self):
        with self.assertRaises(ValueError):
            line_distances(PARABOLA, (1, 1), (1, 1))


class TestConverge(unittest.TestCase):
    """Boucle de clipping sur une fonction distance."""

    def setUp(self):
        self.params = clip_params()

    def test_single_root(self):
        sub = Subcurve([-1.0, 1.0])
        status, t = converge(sub, self.params)
        self.assertEqual(status, ROOT)
        self.assertAlmostEqual(t, 0.5, delta=0.01)

    def test_reject(self):
        status, t = converge(Subcurve([1.0, 2.0, 0.5]), self.params)
        self.assertEqual(status, REJECT)
        self.assertIsNone(t)

    def test_two_roots_split(self):
        """Deux racines dans l'intervalle : la coupe stagne."""
        status, t = converge(Subcurve([-2.0, 8.0, -2.0]), self.params)
        self.assertEqual(status, SPLIT)

    def test_interval_consistent(self):
        """L'intervalle suit les coefficients coupes."""
        sub = Subcurve([-2.0, 8.0, -2.0])
        converge(sub, self.params)
        self.assertGreater(sub.low, 0.1 - 1e-9)
        self.assertLess(sub.high, 0.9 + 1e-9)

    def test_narrow_interval_without_sign_change_rejects(self):
        """Intervalle etroit mais coefficients de meme signe : pas de racine.

        f(t) = 3 t^2 - 3 t + 1 >= 0.25 ; l'enveloppe coupe zero sur
        [1/3, 2/3], plus etroit que la tolerance choisie.
        """
        params = clip_params({'TOLERANCE': 0.5})
        sub = Subcurve([1.0, -0.5, 1.0])
        status, t = converge(sub, params)
        self.assertEqual(status, REJECT)
        self.assertIsNone(t)


class TestIntersectCurveLine(unittest.TestCase):
    """Point d'entree courbe/droite."""

    def test_parabola_two_roots(self):
        res = intersect_curve_line(PARABOLA, (0, 2), (1, 2))
        self.assertEqual(res.status, CONVERGED)
        self.assertEqual(len(res), 2)
        for t, expected in zip(res, ROOTS):
            self.assertAlmostEqual(t, expected, delta=0.01)

    def test_no_intersection(self):
        res = intersect_curve_line(PARABOLA, (0, 20), (1, 20))
        self.assertEqual(len(res), 0)
        self.assertTrue(res.converged)

    def test_line_direction_irrelevant(self):
        a = intersect_curve_line(PARABOLA, (0, 2), (1, 2)).records
        b = intersect_curve_line(PARABOLA, (7, 2), (-3, 2)).records
        np.testing.assert_allclose(a, b, atol=1e-9)

    def test_single_hit(self):
        res = intersect_curve_line(PARABOLA, (0, 2), (1, 2), single_hit=True)
        self.assertEqual(len(res), 1)
        self.assertAlmostEqual(res[0], ROOTS[0], delta=0.01)

    def test_endpoint_root(self):
        """Racine a l'extremite de la courbe."""
        res = intersect_curve_line(PARABOLA, (0, 0), (1, 0))
        self.assertEqual(len(res), 2)
        self.assertAlmostEqual(res[0], 0.0, delta=0.01)
        self.assertAlmostEqual(res[1], 1.0, delta=0.01)

    def test_cubic_three_roots(self):
        pts = [[0, -1], [1, 4], [2, -3], [3, 1]]
        res = intersect_curve_line(pts, (-1, 0), (4, 0))
        self.assertEqual(len(res), 3)
        ys = de_casteljau(np.asarray(pts, dtype=float), res.records)[:, 1]
        self.assertLess(np.abs(ys).max(), 0.2)

    def test_cap_truncates(self):
        pts = [[0, -1], [1, 4], [2, -3], [3, 1]]
        res = intersect_curve_line(pts, (-1, 0), (4, 0),
                                   params={'MAX_INTERSECTIONS': 2})
        self.assertEqual(len(res), 2)
        self.assertEqual(res.status, TRUNCATED)

    def test_tolerance_override(self):
        res = intersect_curve_line(PARABOLA, (0, 2), (1, 2),
                                   params={'TOLERANCE': 1e-6})
        self.assertEqual(len(res), 2)
        for t, expected in zip(res, ROOTS):
            self.assertAlmostEqual(t, expected, places=5)

    def test_near_miss_not_reported(self):
        """Courbe passant a distance ~0.85 de la droite : aucune racine."""
        pts = [[0, 1.90], [1, 3.97], [2, -3.11], [3, 4.37]]
        res = intersect_curve_line(pts, (0, 0), (1, 0))
        self.assertEqual(len(res), 0)
        self.assertTrue(res.converged)
        res = intersect_curve_line([[0, 1], [1, -0.5], [2, 1]], (0, 0),
                                   (1, 0), params={'TOLERANCE': 0.5})
        self.assertEqual(len(res), 0)

    def test_random_roots_lie_on_line(self):
        """Chaque racine rapportee est proche d'un zero de la distance.

        Sur un intervalle de largeur w, les coefficients s'etalent d'au
        plus n * w * max|delta| ; s'ils changent de signe, la distance au
        milieu est bornee par cet etalement.
        """
        params = clip_params()
        rng = np.random.RandomState(2)
        for _ in range(200):
            n = rng.randint(2, 6)
            ys = rng.uniform(-5, 5, n + 1)
            pts = np.column_stack([np.arange(n + 1.), ys])
            res = intersect_curve_line(pts, (0, 0), (1, 0))
            bound = (n * params['TOLERANCE'] * np.abs(np.diff(ys)).max()
                     + params['ZERO'] + 1e-9)
            if len(res):
                dist = de_casteljau(pts, res.records)[:, 1]
                self.assertLessEqual(np.abs(dist).max(), bound)

    def test_degree_above_max_raises(self):
        pts = np.column_stack([np.arange(11.), np.zeros(11)])
        with self.assertRaises(ValueError):
            intersect_curve_line(pts, (0, 1), (1, 1))

    def test_strict_raises_on_budget(self):
        """Budget de subdivision epuise : ConvergenceError en mode strict."""
        pts = [[0, -1], [1, 4], [2, -3], [3, 1]]
        params = {'MAX_DEPTH': 1, 'MAX_ROOT_ITERATIONS': 1}
        res = intersect_curve_line(pts, (-1, 0), (4, 0), params=params)
        self.assertFalse(res.converged)
        with self.assertRaises(ConvergenceError) as ctx:
            intersect_curve_line(pts, (-1, 0), (4, 0), params=params,
                                 strict=True)
        self.assertIsInstance(ctx.exception.result, IntersectionResult)
        self.assertFalse(ctx.exception.result.converged)


if __name__ == '__main__':
    unittest.main()
