"""
🌱 Initializer
Random genotype generation for the seeding generation
"""

from typing import Optional

import numpy as np

from genalgo.core.exceptions import check_positive, check_probability
from .genotype import Genotype


class RandomInitializer:
    """
    Produces random genotypes where each bit is 1 with probability ``prob``.

    Not thread safe: create one instance per thread.
    """

    def __init__(self, size: int, seed: Optional[int] = None, prob: float = 0.5):
        """
        Args:
            size: Genotype length N
            seed: Seed of the operator's random stream
            prob: Probability of a bit being set
        """
        self.size = check_positive("size", size)
        self.prob = check_probability("prob", prob)
        self._rng = np.random.default_rng(seed)

    def __call__(self) -> Genotype:
        return Genotype._wrap(self._rng.random(self.size) < self.prob)
