"""
intseq_gp/population.py - Population value, statistics and reproduction
"""
import random
from typing import Iterable, Iterator, Sequence

import numpy as np

from .config import GPConfig
from .fitness import TestPair
from .genome import Individual
from .instructions import INGREDIENTS, Instruction
from .selection import select
from .variation import crossover, mutate


class Population:
    """An immutable generation of individuals.

    Reproduction never changes a population; next_generation() builds a new
    one. Duplicates are allowed.
    """

    def __init__(self, individuals: Iterable[Individual], generation: int = 0):
        self._individuals = tuple(individuals)
        self._generation = generation

    @classmethod
    def initialize(cls, size: int, test_pairs: Sequence[TestPair], rng: random.Random,
                   genome_length: int = 5,
                   ingredients: Sequence[Instruction] = INGREDIENTS) -> 'Population':
        """Generation 0: size random genomes, each scored on test_pairs"""
        return cls(Individual.create_random(test_pairs, rng, genome_length, ingredients)
                   for _ in range(size))

    @property
    def individuals(self):
        return self._individuals

    @property
    def generation(self) -> int:
        return self._generation

    def __len__(self) -> int:
        return len(self._individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    def __getitem__(self, index):
        return self._individuals[index]

    def best(self) -> Individual:
        """Individual with the lowest error (the last one on ties)"""
        best = self._individuals[0]
        for individual in self._individuals[1:]:
            if not best.error < individual.error:
                best = individual
        return best

    def diversity(self) -> float:
        """Distinct individuals as a fraction of the population size"""
        return len(set(self._individuals)) / len(self._individuals)

    def average_genome_length(self) -> float:
        return float(np.mean([len(individual) for individual in self._individuals]))

    def make_child(self, test_pairs: Sequence[TestPair], config: GPConfig,
                   rng: random.Random) -> Individual:
        """Select two parents, optionally cross and mutate, and score the result"""
        parent1 = select(self, test_pairs, config.selection, rng)
        parent2 = select(self, test_pairs, config.selection, rng)

        genome = parent1.genome
        if config.crossover:
            genome = crossover(parent1.genome, parent2.genome, config.crossover_type,
                               config.add_rate, config.del_rate, rng)
        if config.mutate:
            genome = mutate(genome, config.add_rate, config.del_rate, rng, config.ingredients)

        return Individual(genome, test_pairs)

    def next_generation(self, test_pairs: Sequence[TestPair], config: GPConfig,
                        rng: random.Random) -> 'Population':
        """Build the following generation, carrying the best over under elitism"""
        children = []
        if config.elitism:
            children.append(self.best())

        while len(children) < len(self._individuals):
            children.append(self.make_child(test_pairs, config, rng))

        return Population(children, self._generation + 1)
