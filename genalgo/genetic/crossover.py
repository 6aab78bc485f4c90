"""
🔀 Crossover Operators
Recombination strategies over bit-vector genotypes

ATTENTION: operators own their random stream and are not thread safe,
create one instance per thread.
"""

from typing import Optional

import numpy as np

from genalgo.core.exceptions import check_positive, check_probability
from .genotype import Genotype
from .operators import CrossOver


class SplitCrossOver:
    """
    Single-point crossover based on a random split position.

    A split position ``p`` in ``[0, N-1]`` and a coin are drawn for every
    call. The child takes ``[0, p)`` from one parent and ``[p, N)`` from the
    other, the coin deciding which parent provides the prefix.
    """

    def __init__(self, size: int, seed: Optional[int] = None):
        """
        Args:
            size: Expected genotype length N (the split position is drawn
                over the actual length of the parents)
            seed: Seed of the operator's random stream
        """
        self.size = check_positive("size", size)
        self._rng = np.random.default_rng(seed)

    def __call__(self, a: Genotype, b: Genotype) -> Genotype:
        pos = int(self._rng.integers(0, len(a)))
        if self._rng.integers(0, 2) == 0:
            first, second = a.bits, b.bits
        else:
            first, second = b.bits, a.bits
        child = np.concatenate((first[:pos], second[pos:]))
        return Genotype._wrap(child)


class MixCrossOver:
    """
    Uniform crossover.

    Each bit is copied from either parent with probability 0.5, independently
    of the other positions.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def __call__(self, a: Genotype, b: Genotype) -> Genotype:
        # coin == 0 keeps parent a's bit
        coins = self._rng.integers(0, 2, size=len(a)).astype(bool)
        return Genotype._wrap(np.where(coins, b.bits, a.bits))


class CrossOverOnProb:
    """
    Applies a crossover operator with probability ``prob``.

    When no recombination happens, a copy of one of the two parents chosen
    at random is returned. Prefer the ``make_crossover_on_prob`` helper.
    """

    def __init__(self, seed: Optional[int], prob: float, crossover: CrossOver):
        """
        Args:
            seed: Seed of the wrapper's own random stream
            prob: Crossover rate in [0, 1]
            crossover: Wrapped crossover operator
        """
        self.prob = check_probability("prob", prob)
        self.crossover = crossover
        self._rng = np.random.default_rng(seed)

    def __call__(self, a: Genotype, b: Genotype) -> Genotype:
        if self._rng.random() < self.prob:
            return self.crossover(a, b)
        if self._rng.integers(0, 2) == 0:
            return a.copy()
        return b.copy()


def make_crossover_on_prob(seed: Optional[int], prob: float, crossover: CrossOver) -> CrossOverOnProb:
    """Helper for construction of CrossOverOnProb instances."""
    return CrossOverOnProb(seed, prob, crossover)
