#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Resultats d'un calcul d'intersection et accumulateur de recursion.

- IntersectionResult : sequence ordonnee des intersections trouvees,
  statut de terminaison et compteurs de subdivisions / clippings.
- IntersectionAccumulator : etat partage par toutes les branches d'une
  recursion (resultats, plafond, compteurs, observateur). Il est cree
  par le point d'entree et passe explicitement aux appels recursifs.

@author: Nervures
@date: 2026-10
"""

import logging

logger = logging.getLogger(__name__)

CONVERGED = 'converged'
TRUNCATED = 'truncated'
NOT_CONVERGED = 'not_converged'


class ConvergenceError(RuntimeError):
    """Le calcul n'a pas converge dans les bornes de recursion.

    Le resultat partiel est disponible dans l'attribut ``result``.
    """

    def __init__(self, message, result):
        super(ConvergenceError, self).__init__(message)
        self.result = result


# ======================================================================
#  IntersectionResult
# ======================================================================

class IntersectionResult(object):
    """Intersections trouvees, dans l'ordre de parcours de la recursion.

    Pour deux courbes, chaque element est un couple (t, s) : parametre
    sur la courbe A, parametre sur la courbe B. Pour une courbe et une
    droite, chaque element est le parametre t sur la courbe.

    Se comporte comme une sequence en lecture seule.
    """

    def __init__(self, records=None, status=CONVERGED, n_split=0, n_clip=0):
        """
        :param records: intersections trouvees
        :type records: list or None
        :param status: 'converged', 'truncated' ou 'not_converged'
        :type status: str
        :param n_split: nombre de subdivisions effectuees
        :type n_split: int
        :param n_clip: nombre de clippings effectues
        :type n_clip: int
        """
        if status not in (CONVERGED, TRUNCATED, NOT_CONVERGED):
            raise ValueError("Statut inconnu '%s'" % status)
        self._records = tuple(records) if records is not None else ()
        self._status = status
        self._n_split = n_split
        self._n_clip = n_clip

    def __repr__(self):
        return "IntersectionResult(%d intersections, %s)" % (
            len(self._records), self._status)

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def records(self):
        """Intersections, list de (t, s) ou de t."""
        return list(self._records)

    @property
    def status(self):
        return self._status

    @property
    def converged(self):
        """True si toutes les branches ont termine sans plafond atteint."""
        return self._status == CONVERGED

    @property
    def truncated(self):
        """True si des intersections ont ete ignorees (plafond atteint)."""
        return self._status == TRUNCATED

    @property
    def n_split(self):
        return self._n_split

    @property
    def n_clip(self):
        return self._n_clip

    def check(self):
        """Leve ConvergenceError si le calcul n'a pas converge.

        :returns: self (pour chainage)
        :raises ConvergenceError: si status == 'not_converged'
        """
        if self._status == NOT_CONVERGED:
            raise ConvergenceError(
                "Intersection non convergee apres %d subdivisions "
                "(%d intersections partielles)"
                % (self._n_split, len(self._records)), self)
        return self


# ======================================================================
#  IntersectionAccumulator
# ======================================================================

class IntersectionAccumulator(object):
    """Etat partage par les branches d'une recursion d'intersection."""

    def __init__(self, max_records=20, merge_distance=0.01, single_hit=False,
                 observer=None):
        """
        :param max_records: plafond du nombre d'intersections
        :type max_records: int
        :param merge_distance: deux intersections plus proches que cette
            distance (sur chaque parametre) sont fusionnees
        :type merge_distance: float
        :param single_hit: arreter toutes les branches des la premiere
            intersection
        :type single_hit: bool
        :param observer: observateur des etapes intermediaires
        :type observer: AbstractClipObserver or None
        """
        self.max_records = max_records
        self.merge_distance = merge_distance
        self.single_hit = single_hit
        self.observer = observer
        self.records = []
        self.n_split = 0
        self.n_clip = 0
        self.truncated = False
        self.converged = True

    @property
    def done(self):
        """True si plus aucune branche ne doit etre exploree."""
        if self.truncated:
            return True
        return self.single_hit and len(self.records) > 0

    def _is_duplicate(self, record):
        tol = self.merge_distance
        for other in self.records:
            if isinstance(record, tuple):
                if all(abs(a - b) <= tol for a, b in zip(record, other)):
                    return True
            elif abs(record - other) <= tol:
                return True
        return False

    def add(self, record):
        """Ajoute une intersection, sauf doublon ou plafond atteint.

        :param record: (t, s) ou t
        :returns: True si l'intersection a ete retenue
        :rtype: bool
        """
        if self._is_duplicate(record):
            logger.debug("Intersection %s fusionnee avec une existante",
                         record)
            return False
        if len(self.records) >= self.max_records:
            if not self.truncated:
                logger.warning("Plafond de %d intersections atteint, "
                               "resultats incomplets", self.max_records)
            self.truncated = True
            return False
        self.records.append(record)
        logger.debug("Intersection %d : %s", len(self.records), record)
        return True

    def clipped(self, curve_id, subcurve):
        """Enregistre un clipping et previent l'observateur."""
        self.n_clip += 1
        if self.observer is not None:
            self.observer.on_clip(curve_id, subcurve.points.copy(),
                                  (subcurve.low, subcurve.high))
            self.observer.on_counts(self.n_split, self.n_clip)

    def split(self, count=1):
        """Enregistre des subdivisions et previent l'observateur."""
        self.n_split += count
        if self.observer is not None:
            self.observer.on_counts(self.n_split, self.n_clip)

    def give_up(self, reason):
        """Marque une branche abandonnee (bornes de recursion atteintes)."""
        if self.converged:
            logger.warning("Branche abandonnee : %s", reason)
        self.converged = False

    def result(self):
        """Resultat fige.

        :rtype: IntersectionResult
        """
        if not self.converged:
            status = NOT_CONVERGED
        elif self.truncated:
            status = TRUNCATED
        else:
            status = CONVERGED
        return IntersectionResult(self.records, status, self.n_split,
                                  self.n_clip)
