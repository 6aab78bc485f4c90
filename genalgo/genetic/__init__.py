"""
🧬 Genetic Algorithm Module
Generational genetic algorithm over fixed-length bit-vector genotypes
"""

from .genotype import Couple, Genotype, Hypothesis
from .operators import CrossOver, Initializer, Mutation, Rank, Selection
from .population import Population
from .crossover import CrossOverOnProb, MixCrossOver, SplitCrossOver, make_crossover_on_prob
from .mutation import BitFlipMutation, RandomMutation
from .selection import RouletteWheelSelection, TournamentSelection
from .initializer import RandomInitializer
from .decoder import Decoder
from .solver import GeneticSolver, SolverConfig, solve

__all__ = [
    'Genotype',
    'Hypothesis',
    'Couple',
    'Initializer',
    'Selection',
    'CrossOver',
    'Mutation',
    'Rank',
    'Population',
    'SplitCrossOver',
    'MixCrossOver',
    'CrossOverOnProb',
    'make_crossover_on_prob',
    'RandomMutation',
    'BitFlipMutation',
    'RouletteWheelSelection',
    'TournamentSelection',
    'RandomInitializer',
    'Decoder',
    'GeneticSolver',
    'SolverConfig',
    'solve',
]
