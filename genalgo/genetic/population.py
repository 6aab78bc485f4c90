"""
👥 Population
Scored genotypes of one generation, bound to a single rank operator
"""

from typing import Iterator, List, Optional, Tuple

from genalgo.core.exceptions import ConfigurationError, EmptyPopulationError, GenAlgoError
from genalgo.core.logger import get_logger
from .genotype import Couple, Genotype, Hypothesis
from .operators import Initializer, Rank, Selection

logger = get_logger(__name__)


class Population:
    """
    Ordered collection of hypotheses scored by the same rank operator.

    The best member is tracked on every insertion so ``top()`` is O(1). Ties
    keep the member that was inserted first.
    """

    def __init__(self, rank: Rank):
        """
        Initialize an empty population.

        Args:
            rank: Rank operator used to score every genotype pushed in
        """
        self._rank = rank
        self._hypotheses: List[Hypothesis] = []
        self._best_index: Optional[int] = None

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def hypotheses(self) -> Tuple[Hypothesis, ...]:
        """Snapshot of the current members, in insertion order."""
        return tuple(self._hypotheses)

    def init(self, initializer: Initializer, n: int):
        """
        Fill an empty population with ``n`` genotypes from ``initializer``.

        Args:
            initializer: Initializer operator, called exactly ``n`` times
            n: Number of genotypes to create, must be >= 1
        """
        if self._hypotheses:
            raise GenAlgoError("Population.init requires an empty population")
        if int(n) != n or n < 1:
            raise ConfigurationError(f"Population size must be a positive integer, got {n}")

        for _ in range(int(n)):
            self.push(initializer())

        logger.debug(f"Initialized population of {len(self._hypotheses)} genotypes")

    def push(self, genotype: Genotype) -> Hypothesis:
        """
        Score ``genotype`` and insert it. No deduplication is done.

        Returns:
            Hypothesis: The inserted hypothesis
        """
        hypothesis = Hypothesis(genotype, self._rank(genotype))
        self._hypotheses.append(hypothesis)
        if self._best_index is None or self._hypotheses[self._best_index].rank < hypothesis.rank:
            self._best_index = len(self._hypotheses) - 1
        return hypothesis

    def top(self) -> Hypothesis:
        """Return the hypothesis with maximal rank."""
        if self._best_index is None:
            raise EmptyPopulationError("top() called on an empty population")
        return self._hypotheses[self._best_index]

    def select(self, selection: Selection, count: int) -> List[Couple]:
        """
        Delegate parent selection to ``selection``.

        Args:
            selection: Selection operator
            count: Number of couples requested

        Returns:
            List[Couple]: Exactly what the selection operator produced
        """
        return list(selection(self.hypotheses, count))

    def reset(self):
        """Drop every member, keeping the rank binding."""
        self._hypotheses = []
        self._best_index = None

    def __len__(self) -> int:
        return len(self._hypotheses)

    def __iter__(self) -> Iterator[Hypothesis]:
        return iter(tuple(self._hypotheses))

    def __str__(self) -> str:
        best = self._hypotheses[self._best_index].rank if self._best_index is not None else None
        return f"Population(size={len(self._hypotheses)}, best_rank={best})"

    def __repr__(self) -> str:
        return self.__str__()
