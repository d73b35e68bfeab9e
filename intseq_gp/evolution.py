"""
intseq_gp/evolution.py - Generation loop
"""
import logging
import random
from typing import Iterable, Optional

from .config import ConfigurationError, GPConfig
from .fitness import TestPair
from .genome import Individual
from .population import Population
from .report import GenerationReport, Reporter

logger = logging.getLogger(__name__)


def gp(config: GPConfig, test_pairs: Iterable[TestPair],
       rng: Optional[random.Random] = None,
       reporter: Optional[Reporter] = None) -> Individual:
    """Evolve programs for test_pairs and return the best individual found.

    Every generation, generation 0 included, is reported before the
    termination check. The run stops as soon as an individual has zero error
    or `config.generations` generations have been bred. Passing the same
    seeded rng and config reproduces a run exactly.
    """
    config.validate()
    test_pairs = tuple(test_pairs)
    if not test_pairs:
        raise ConfigurationError("At least one test pair is required")
    if rng is None:
        rng = random.Random(config.seed)

    logger.info(f"Starting run: population {config.population_size}, "
                f"{config.generations} generations, {len(test_pairs)} test pairs, "
                f"{config.selection} selection")

    population = Population.initialize(config.population_size, test_pairs, rng,
                                       config.initial_genome_length, config.ingredients)

    while True:
        best = population.best()
        report = GenerationReport.from_population(population)
        if reporter is not None:
            reporter(report)
        logger.debug(f"Gen {population.generation}: best error {best.error}, "
                     f"diversity {report.diversity:.3f}")

        if best.error == 0 or population.generation >= config.generations:
            logger.info(f"Finished at generation {population.generation} "
                        f"with best error {best.error}")
            return best

        population = population.next_generation(test_pairs, config, rng)
