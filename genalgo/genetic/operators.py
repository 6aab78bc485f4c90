"""
🔌 Operator Contracts
Capability interfaces for the five operators composed by the solver loop

Any callable with the matching signature satisfies a contract, plain
functions included. Stochastic operators own a private
``numpy.random.Generator``: an instance is NOT thread safe, create one per
thread with its own seed.
"""

from typing import Any, List, Protocol, Sequence, runtime_checkable

from .genotype import Couple, Genotype, Hypothesis


@runtime_checkable
class Initializer(Protocol):
    def __call__(self) -> Genotype:
        """Produce one new genotype per call."""


@runtime_checkable
class Selection(Protocol):
    def __call__(self, hypotheses: Sequence[Hypothesis], count: int) -> List[Couple]:
        """Return exactly ``count`` parent couples drawn from ``hypotheses``."""


@runtime_checkable
class CrossOver(Protocol):
    def __call__(self, a: Genotype, b: Genotype) -> Genotype:
        """Produce one child with the parents' length."""


@runtime_checkable
class Mutation(Protocol):
    def __call__(self, genotype: Genotype) -> Genotype:
        """Produce a genotype of the same length, possibly unchanged."""


@runtime_checkable
class Rank(Protocol):
    def __call__(self, genotype: Genotype) -> Any:
        """Score a genotype; higher is better, values must be totally ordered."""
