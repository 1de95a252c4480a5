#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests de la lecture et de la validation des parametres.

Lance :
    python test_clipconfig.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import shutil
import tempfile
import unittest

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.clipconfig import (_typed_value, clip_params, load_config,
                              load_defaults, merge_params, validate_params)


class TestTypedValue(unittest.TestCase):
    """Le type depend de la cle."""

    def test_int_and_float_keys(self):
        value = _typed_value('MAX_INTERSECTIONS', '20', 'test')
        self.assertEqual(value, 20)
        self.assertIsInstance(value, int)
        value = _typed_value('ZERO', '1e-6', 'test')
        self.assertIsInstance(value, float)
        self.assertAlmostEqual(value, 1e-6)
        self.assertIsInstance(_typed_value('TOLERANCE', 1, 'test'), float)

    def test_unknown_key(self):
        with self.assertRaises(KeyError):
            _typed_value('VERBOSE', 'true', 'test')

    def test_bad_value(self):
        with self.assertRaises(ValueError):
            _typed_value('MAX_DEPTH', '4.5', 'test')
        with self.assertRaises(ValueError):
            _typed_value('TOLERANCE', 'abc', 'test')


class TestLoadConfig(unittest.TestCase):
    """Fichiers cle=valeur."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write(self, text):
        path = os.path.join(self.tmpdir, 'test.cfg')
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_load_file(self):
        path = self.write("# commentaire\n\nTOLERANCE = 0.001\n"
                          "MAX_INTERSECTIONS=5   # plafond\n")
        params = load_config(path)
        self.assertEqual(params, {'TOLERANCE': 0.001,
                                  'MAX_INTERSECTIONS': 5})
        self.assertIsInstance(params['MAX_INTERSECTIONS'], int)

    def test_line_without_equal(self):
        path = self.write("TOLERANCE=0.01\nbad line\n")
        with self.assertRaises(ValueError) as ctx:
            load_config(path)
        self.assertIn('test.cfg:2', str(ctx.exception))

    def test_unknown_key_in_file(self):
        path = self.write("VERBOSE=true\n")
        with self.assertRaises(KeyError):
            load_config(path)

    def test_missing_file_raises(self):
        with self.assertRaises(IOError):
            load_config(os.path.join(self.tmpdir, 'absent.cfg'))

    def test_defaults(self):
        params = load_defaults()
        self.assertAlmostEqual(params['TOLERANCE'], 0.01)
        self.assertEqual(params['MAX_INTERSECTIONS'], 20)
        self.assertEqual(params['MAX_ITERATIONS'], 20)
        self.assertEqual(params['MAX_ROOT_ITERATIONS'], 10)
        self.assertEqual(params['MAX_DEGREE'], 9)
        self.assertAlmostEqual(params['STALL_BOTH'], 0.8)
        self.assertAlmostEqual(params['STALL_SINGLE'], 0.98)

    def test_merge(self):
        defaults = {'TOLERANCE': 0.01, 'MAX_DEPTH': 40}
        merged = merge_params(defaults, {'MAX_DEPTH': '12'})
        self.assertEqual(merged, {'TOLERANCE': 0.01, 'MAX_DEPTH': 12})
        self.assertEqual(defaults['MAX_DEPTH'], 40)
        self.assertEqual(merge_params(defaults, None), defaults)
        with self.assertRaises(KeyError):
            merge_params(defaults, {'DEPTH': 3})


class TestClipParams(unittest.TestCase):
    """Parametres complets et validation."""

    def test_merge_distance_follows_tolerance(self):
        self.assertAlmostEqual(clip_params()['MERGE_DISTANCE'], 0.01)
        params = clip_params({'TOLERANCE': 0.001})
        self.assertAlmostEqual(params['MERGE_DISTANCE'], 0.001)
        params = clip_params({'TOLERANCE': 0.001, 'MERGE_DISTANCE': 0.05})
        self.assertAlmostEqual(params['MERGE_DISTANCE'], 0.05)

    def test_unknown_key(self):
        with self.assertRaises(KeyError):
            clip_params({'tolerance': 0.1})

    def test_fraction_out_of_range(self):
        for value in (0.0, -0.1, 1.5):
            with self.assertRaises(ValueError):
                clip_params({'TOLERANCE': value})

    def test_int_below_one(self):
        with self.assertRaises(ValueError):
            clip_params({'MAX_INTERSECTIONS': 0})

    def test_zero_positive(self):
        with self.assertRaises(ValueError):
            clip_params({'ZERO': 0.0})

    def test_progress_order(self):
        with self.assertRaises(ValueError):
            clip_params({'PROGRESS_LOW': 0.9, 'PROGRESS_HIGH': 0.1})

    def test_validate_defaults(self):
        params = load_defaults()
        params['MERGE_DISTANCE'] = params['TOLERANCE']
        validate_params(params)

    def test_does_not_modify_user_dict(self):
        user = {'TOLERANCE': 0.001}
        clip_params(user)
        self.assertEqual(user, {'TOLERANCE': 0.001})


if __name__ == '__main__':
    unittest.main()
