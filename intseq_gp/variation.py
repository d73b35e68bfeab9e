"""
intseq_gp/variation.py - UMAD mutation and crossover operators

Every operator returns a new genome tuple; parents are never modified.
"""
import random
from typing import List, Sequence

from .config import ConfigurationError
from .instructions import INGREDIENTS, Instruction


def _shuffled_pair(first: Instruction, second: Instruction, rng: random.Random) -> List[Instruction]:
    pair = [first, second]
    rng.shuffle(pair)
    return pair


def _deletion_pass(genes: Sequence[Instruction], del_rate: float, rng: random.Random) -> tuple:
    return tuple(gene for gene in genes if rng.random() >= del_rate)


def mutate(genome: Sequence[Instruction], add_rate: float, del_rate: float,
           rng: random.Random, ingredients: Sequence[Instruction] = INGREDIENTS) -> tuple:
    """Uniform mutation by addition and deletion (UMAD).

    First each gene, with probability add_rate, gets a random ingredient
    placed before or after it. Then every gene of that result, new ones
    included, is dropped with probability del_rate.
    """
    with_additions = []
    for gene in genome:
        if rng.random() < add_rate:
            with_additions.extend(_shuffled_pair(gene, rng.choice(ingredients), rng))
        else:
            with_additions.append(gene)
    return _deletion_pass(with_additions, del_rate, rng)


def umad_crossover(genome1: Sequence[Instruction], genome2: Sequence[Instruction],
                   add_rate: float, del_rate: float, rng: random.Random) -> tuple:
    """UMAD with the second parent as the source of added genes.

    Only positions present in both parents are paired; the longer parent's
    tail is dropped. This already adds and deletes, so children made with it
    should not be mutated again.
    """
    with_additions = []
    for gene1, gene2 in zip(genome1, genome2):
        if rng.random() < add_rate:
            with_additions.extend(_shuffled_pair(gene1, gene2, rng))
        else:
            with_additions.append(gene1)
    return _deletion_pass(with_additions, del_rate, rng)


def single_point_crossover(genome1: Sequence[Instruction], genome2: Sequence[Instruction],
                           rng: random.Random) -> tuple:
    """Prefix of genome1 joined to the suffix of genome2 at one cut point"""
    point = rng.randint(0, min(len(genome1), len(genome2)))
    return tuple(genome1[:point]) + tuple(genome2[point:])


def uniform_crossover(genome1: Sequence[Instruction], genome2: Sequence[Instruction],
                      rng: random.Random) -> tuple:
    """Coin flip per shared position, plus a random-length head of the longer tail"""
    overlap = tuple(rng.choice((gene1, gene2)) for gene1, gene2 in zip(genome1, genome2))
    shared = min(len(genome1), len(genome2))
    longer = genome1 if len(genome1) > len(genome2) else genome2
    extra = tuple(longer[shared:])
    return overlap + extra[:rng.randint(0, len(extra))]


def crossover(genome1: Sequence[Instruction], genome2: Sequence[Instruction], strategy: str,
              add_rate: float, del_rate: float, rng: random.Random) -> tuple:
    if strategy == 'umad':
        return umad_crossover(genome1, genome2, add_rate, del_rate, rng)
    elif strategy == 'single-point':
        return single_point_crossover(genome1, genome2, rng)
    elif strategy == 'uniform':
        return uniform_crossover(genome1, genome2, rng)
    else:
        raise ConfigurationError(f"Unknown crossover strategy: {strategy!r}")
