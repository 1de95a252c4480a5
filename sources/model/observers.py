#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Observateurs concrets du Bezier clipping.

- RecordingObserver : garde en memoire les evenements recus.
- PlotObserver : trace chaque polygone clippe sur des axes matplotlib
  (vert pour la courbe B, gris pour la courbe A).

Usage::

    obs = PlotObserver()
    a.plot(ax=obs.ax, show=False)
    a.intersections(b, observer=obs)

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .base import AbstractClipObserver


class RecordingObserver(AbstractClipObserver):
    """Enregistre les clippings et les compteurs successifs."""

    def __init__(self):
        self.clips = []    # (curve_id, points, interval)
        self.counts = []   # (n_split, n_clip)

    def __repr__(self):
        return "RecordingObserver(%d clips)" % len(self.clips)

    def on_clip(self, curve_id, control_points, interval):
        self.clips.append((curve_id, np.array(control_points),
                           tuple(interval)))

    def on_counts(self, n_split, n_clip):
        self.counts.append((n_split, n_clip))

    @property
    def last_counts(self):
        """Derniers compteurs recus, (0, 0) si aucun."""
        if not self.counts:
            return (0, 0)
        return self.counts[-1]


class PlotObserver(AbstractClipObserver):
    """Trace les polygones clippes au fil du calcul."""

    COLORS = {'A': 'gray', 'B': 'green'}

    def __init__(self, ax=None):
        """
        :param ax: axes matplotlib existants (None = creation)
        """
        import matplotlib.pyplot as plt

        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(8, 8))
        self.ax = ax
        self.n_split = 0
        self.n_clip = 0

    def on_clip(self, curve_id, control_points, interval):
        pts = np.asarray(control_points)
        if pts.ndim != 2:
            # coefficients scalaires du cas courbe/droite
            return
        self.ax.plot(pts[:, 0], pts[:, 1], '-', linewidth=0.6,
                     color=self.COLORS.get(curve_id, 'black'))

    def on_counts(self, n_split, n_clip):
        self.n_split = n_split
        self.n_clip = n_clip
        self.ax.set_title("Subdivisions : %d   Clippings : %d"
                          % (n_split, n_clip))
