#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Package bezclip : intersections de courbes de Bezier par Bezier clipping.

Intersections courbe/courbe et courbe/droite, sans discretisation des
courbes ni resolution directe de systemes polynomiaux.

Usage::

    from bezclip import Bezier

    a = Bezier([[0, 0], [5, 10], [10, 0]])
    b = Bezier([[0, 2], [10, 2]])
    result = a.intersections(b)
    result.status      # 'converged'

@author: Nervures
@date: 2026-10
"""

from .bezier import Bezier, de_casteljau
from .subdivision import Subcurve, split_at
from .bernstein import isolate_interval
from .fatline import FatLine, ClipInterval, hull_clip
from .curveline import intersect_curve_line
from .overlap import intersect_curve_curve
from .results import (IntersectionResult, ConvergenceError, CONVERGED,
                      TRUNCATED, NOT_CONVERGED)
from .base import AbstractClipObserver
from .observers import RecordingObserver, PlotObserver
from .clipconfig import load_config, load_defaults, merge_params, clip_params
