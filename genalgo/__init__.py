"""
🧬 genalgo
Generic genetic algorithm engine over bit-vector genotypes
"""

__version__ = "0.1.0"

from .core import ConfigurationError, EmptyPopulationError, GenAlgoError, get_logger
from .genetic import (
    BitFlipMutation,
    Couple,
    CrossOver,
    CrossOverOnProb,
    Decoder,
    GeneticSolver,
    Genotype,
    Hypothesis,
    Initializer,
    MixCrossOver,
    Mutation,
    Population,
    RandomInitializer,
    RandomMutation,
    Rank,
    RouletteWheelSelection,
    Selection,
    SolverConfig,
    SplitCrossOver,
    TournamentSelection,
    make_crossover_on_prob,
    solve,
)

__all__ = [
    "GenAlgoError",
    "ConfigurationError",
    "EmptyPopulationError",
    "get_logger",
    "Genotype",
    "Hypothesis",
    "Couple",
    "Initializer",
    "Selection",
    "CrossOver",
    "Mutation",
    "Rank",
    "Population",
    "SplitCrossOver",
    "MixCrossOver",
    "CrossOverOnProb",
    "make_crossover_on_prob",
    "RandomMutation",
    "BitFlipMutation",
    "RouletteWheelSelection",
    "TournamentSelection",
    "RandomInitializer",
    "Decoder",
    "GeneticSolver",
    "SolverConfig",
    "solve",
]
