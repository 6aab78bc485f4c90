"""
🧬 Genetic Solver
Generational genetic algorithm with elitism over bit-vector genotypes
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from genalgo.core.exceptions import ConfigurationError
from genalgo.core.logger import get_event_logger, get_logger
from .genotype import Genotype, Hypothesis
from .operators import CrossOver, Initializer, Mutation, Rank, Selection
from .population import Population

logger = get_logger(__name__)


class SolverConfig(BaseModel):
    """Numeric parameters of a solver run."""

    model_config = ConfigDict(frozen=True)

    num_iterations: int = Field(ge=0)
    population_size: int = Field(ge=1)
    verbosity: int = Field(default=0, ge=0)


class GeneticSolver:
    """
    Generic genetic algorithm built on top of five operators:

    - initializer: returns a new Genotype each time it is called
    - selection: receives the scored population and a count, returns that
      many couples of parents
    - crossover: receives two Genotype and returns their child
    - mutation: receives a Genotype and returns another one with some bits
      changed (or not)
    - rank: receives a Genotype and returns its rank

    The rank is maximized, change its sign for minimization. Basic elitism is
    applied: the best genotype found so far is re-inserted in every
    generation.

    Example:
        >>> best = solve(1000, 100,
        ...              RandomInitializer(N, seed=1),
        ...              RouletteWheelSelection(seed=2),
        ...              SplitCrossOver(N, seed=3),
        ...              RandomMutation(seed=4, prob=0.5),
        ...              my_rank)
    """

    def __init__(
        self,
        num_iterations: int,
        population_size: int,
        initializer: Initializer,
        selection: Selection,
        crossover: CrossOver,
        mutation: Mutation,
        rank: Rank,
        verbosity: int = 0
    ):
        """
        Initialize Genetic Solver.

        Args:
            num_iterations: Number of generations to run
            population_size: Number of genotypes in every generation
            initializer: Initializer operator
            selection: Selection operator
            crossover: CrossOver operator
            mutation: Mutation operator
            rank: Rank operator
            verbosity: Diagnostic level, no effect on the result
        """
        try:
            self.config = SolverConfig(
                num_iterations=num_iterations,
                population_size=population_size,
                verbosity=verbosity,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid solver configuration: {e}") from e

        self.initializer = initializer
        self.selection = selection
        self.crossover = crossover
        self.mutation = mutation
        self.rank = rank

        # Run state
        self.population: Optional[Population] = None
        self.best: Optional[Hypothesis] = None
        self.history: List[Dict[str, Any]] = []

        self._events = get_event_logger(
            __name__,
            population_size=population_size,
            num_iterations=num_iterations,
        )

    def _log(self, message: str, level: int, **fields: Any):
        extra = {"extra_data": fields}
        if self.config.verbosity >= level:
            logger.info(message, extra=extra)
        else:
            logger.debug(message, extra=extra)

    def run(self) -> Genotype:
        """
        Run the generational loop.

        Returns:
            Genotype: Best genotype found
        """
        num_iterations = self.config.num_iterations
        population_size = self.config.population_size

        current = Population(self.rank)
        next_population = Population(self.rank)
        self.history = []

        current.init(self.initializer, population_size)
        best = current.top()

        self._log(f"Starting genetic algorithm for {num_iterations} generations "
                  f"(population_size={population_size}, initial best={best.rank})", 1)

        for generation in range(1, num_iterations + 1):
            for a, b in current.select(self.selection, population_size - 1):
                next_population.push(self.mutation(self.crossover(a, b)))

            current, next_population = next_population, current
            next_population.reset()

            improved = False
            # a generation of size 1 has no children, only the elite
            if len(current) > 0:
                top = current.top()
                if best.rank < top.rank:
                    best = top
                    improved = True
                top_rank = top.rank
            else:
                top_rank = None

            # elitism: the best one passes directly
            current.push(best.genotype)

            self.history.append({
                'generation': generation,
                'top_rank': top_rank,
                'best_rank': best.rank,
                'improved': improved,
                'population_size': len(current),
            })
            self._events.debug("generation_completed", generation=generation,
                               top_rank=top_rank, best_rank=best.rank, improved=improved)
            self._log(f"Generation {generation}: Top={top_rank}, Best={best.rank}", 2,
                      **self.history[-1])

        self.population = current
        self.best = best

        self._log(f"Genetic algorithm completed. Best rank: {best.rank}", 1)
        return best.genotype


def solve(
    num_iterations: int,
    population_size: int,
    initializer: Initializer,
    selection: Selection,
    crossover: CrossOver,
    mutation: Mutation,
    rank: Rank,
    verbosity: int = 0
) -> Genotype:
    """
    Run a genetic algorithm and return the best genotype found.

    See GeneticSolver for the meaning of every operator.
    """
    return GeneticSolver(
        num_iterations,
        population_size,
        initializer,
        selection,
        crossover,
        mutation,
        rank,
        verbosity=verbosity,
    ).run()
