"""
🎯 Selection Operators
Parent selection strategies turning a scored population into couples
"""

from typing import List, Optional, Sequence

import numpy as np

from genalgo.core.exceptions import check_positive
from genalgo.core.logger import get_logger
from .genotype import Couple, Hypothesis

logger = get_logger(__name__)


class RouletteWheelSelection:
    """
    Roulette wheel selection - probability proportional to rank.

    Each parent is drawn independently. Ranks are shifted so that negative
    and zero values keep a small, non-null chance of being selected. Ranks
    must be real numbers.
    """

    EPSILON = 1e-10

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def probabilities(self, hypotheses: Sequence[Hypothesis]) -> np.ndarray:
        """
        Compute the sampling probability of every hypothesis.

        Args:
            hypotheses: Scored population members

        Returns:
            np.ndarray: Probabilities summing to 1
        """
        ranks = np.array([float(h.rank) for h in hypotheses], dtype=float)
        min_rank = ranks.min()

        if min_rank < 0:
            # Shift all ranks to be positive
            shifted = ranks - min_rank + self.EPSILON
        else:
            shifted = ranks + self.EPSILON  # Add small value to avoid zero

        total = shifted.sum()
        if not np.isfinite(total) or total <= 0:
            logger.warning("Degenerate rank distribution, falling back to uniform selection")
            return np.full(len(ranks), 1.0 / len(ranks))
        return shifted / total

    def __call__(self, hypotheses: Sequence[Hypothesis], count: int) -> List[Couple]:
        if count == 0:
            return []
        probs = self.probabilities(hypotheses)
        indices = self._rng.choice(len(hypotheses), size=(count, 2), p=probs)
        return [(hypotheses[i].genotype, hypotheses[j].genotype) for i, j in indices]


class TournamentSelection:
    """
    Tournament selection - each parent is the best of a random tournament.
    """

    def __init__(self, seed: Optional[int] = None, tournament_size: int = 3):
        """
        Args:
            seed: Seed of the operator's random stream
            tournament_size: Members competing in each tournament
        """
        self.tournament_size = check_positive("tournament_size", tournament_size)
        self._rng = np.random.default_rng(seed)

    def _tournament(self, hypotheses: Sequence[Hypothesis]) -> Hypothesis:
        size = min(self.tournament_size, len(hypotheses))
        contenders = self._rng.choice(len(hypotheses), size=size, replace=False)
        winner = hypotheses[contenders[0]]
        for index in contenders[1:]:
            if winner.rank < hypotheses[index].rank:
                winner = hypotheses[index]
        return winner

    def __call__(self, hypotheses: Sequence[Hypothesis], count: int) -> List[Couple]:
        return [
            (self._tournament(hypotheses).genotype, self._tournament(hypotheses).genotype)
            for _ in range(count)
        ]
