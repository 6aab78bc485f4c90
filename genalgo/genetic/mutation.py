"""
🧬 Mutation Operators
Bit-flip mutation strategies for genetic algorithms
"""

from typing import Optional

import numpy as np

from genalgo.core.exceptions import check_probability
from .genotype import Genotype


class RandomMutation:
    """
    Flips one randomly chosen bit with probability ``prob``.

    The input genotype is never modified; an unchanged copy is returned when
    no mutation happens. Not thread safe.
    """

    def __init__(self, seed: Optional[int] = None, prob: float = 0.5):
        """
        Args:
            seed: Seed of the operator's random stream
            prob: Probability of mutating a genotype
        """
        self.prob = check_probability("prob", prob)
        self._rng = np.random.default_rng(seed)

    def __call__(self, genotype: Genotype) -> Genotype:
        mutated = genotype.copy()
        if self._rng.random() < self.prob:
            pos = int(self._rng.integers(0, len(mutated)))
            mutated[pos] = not mutated[pos]
        return mutated


class BitFlipMutation:
    """
    Flips every bit independently with probability ``rate``.
    """

    def __init__(self, seed: Optional[int] = None, rate: float = 0.01):
        self.rate = check_probability("rate", rate)
        self._rng = np.random.default_rng(seed)

    def __call__(self, genotype: Genotype) -> Genotype:
        flips = self._rng.random(len(genotype)) < self.rate
        return Genotype._wrap(np.logical_xor(genotype.bits, flips))
