#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Classe abstraite des observateurs du Bezier clipping.

Un observateur recoit les sous-courbes intermediaires et les compteurs
de subdivisions / clippings, par exemple pour les afficher. Il ne
retourne rien et ne peut pas influencer le calcul.

@author: Nervures
@date: 2026-10
"""

from abc import ABC, abstractmethod


class AbstractClipObserver(ABC):
    """Observe les etapes intermediaires d'un calcul d'intersection.

    Responsabilites :
    - Recevoir chaque sous-courbe apres un clipping
    - Recevoir les compteurs courants (subdivisions, clippings)
    """

    @abstractmethod
    def on_clip(self, curve_id, control_points, interval):
        """Appele apres chaque clipping d'une sous-courbe.

        :param curve_id: 'A' ou 'B' pour deux courbes, 'distance' pour
            la fonction distance du cas courbe/droite
        :type curve_id: str
        :param control_points: copie du polygone de controle clippe,
            ndarray(n+1, 2), ou des coefficients ndarray(n+1,)
        :type control_points: numpy.ndarray
        :param interval: intervalle (low, high) sur la courbe d'origine
        :type interval: tuple(float, float)
        """
        pass

    @abstractmethod
    def on_counts(self, n_split, n_clip):
        """Appele a chaque mise a jour des compteurs.

        :param n_split: nombre de subdivisions effectuees
        :type n_split: int
        :param n_clip: nombre de clippings effectues
        :type n_clip: int
        """
        pass
