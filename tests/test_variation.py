"""
tests/test_variation.py - Mutation and crossover operators
"""
import random
from collections import Counter

import pytest

from intseq_gp.config import ConfigurationError
from intseq_gp.genome import random_genome
from intseq_gp.instructions import INGREDIENTS, Op
from intseq_gp.variation import (crossover, mutate, single_point_crossover, umad_crossover,
                                 uniform_crossover)


def genomes(count=30, seed=0):
    rng = random.Random(seed)
    return [random_genome(rng.randint(0, 12), rng) for _ in range(count)]


def test_mutate_without_rates_is_identity():
    for seed, genome in enumerate(genomes()):
        assert mutate(genome, 0, 0, random.Random(seed)) == tuple(genome)


def test_mutate_full_addition_pairs_every_gene():
    genome = (Op.X, 1, Op.ADD, 0)
    child = mutate(genome, 1, 0, random.Random(4))
    assert len(child) == 2 * len(genome)
    for index, gene in enumerate(genome):
        pair = child[2 * index:2 * index + 2]
        assert gene in pair
        assert all(added in INGREDIENTS for added in pair)


def test_mutate_full_deletion_empties_genome():
    assert mutate((Op.X, 1, Op.ADD), 1, 1, random.Random(0)) == ()


def test_mutate_does_not_touch_parent():
    parent = [Op.X, 1, Op.ADD]
    mutate(parent, 0.5, 0.5, random.Random(2))
    assert parent == [Op.X, 1, Op.ADD]


def test_mutate_draws_added_genes_from_given_ingredients():
    child = mutate((Op.X,) * 10, 1, 0, random.Random(5), ingredients=(Op.SQRT,))
    assert Counter(child) == Counter({Op.X: 10, Op.SQRT: 10})


def test_single_point_crossover_of_identical_parents_is_identity():
    for seed, genome in enumerate(genomes()):
        assert single_point_crossover(genome, genome, random.Random(seed)) == tuple(genome)


def test_single_point_crossover_joins_prefix_and_suffix():
    g1 = (1, 1, 1, 1, 1)
    g2 = (0, 0, 0)
    for seed in range(30):
        child = single_point_crossover(g1, g2, random.Random(seed))
        assert len(child) == 3
        point = child.count(1)
        assert child == g1[:point] + g2[point:]


def test_umad_crossover_drops_longer_tail_without_additions():
    g1 = (Op.X, 1, Op.ADD, Op.MUL, 0)
    g2 = (-1, -1)
    assert umad_crossover(g1, g2, 0, 0, random.Random(0)) == (Op.X, 1)


def test_umad_crossover_full_addition_interleaves_parents():
    g1 = (Op.X, Op.ADD, 1)
    g2 = (0, Op.MUL, -1, Op.DIV)
    child = umad_crossover(g1, g2, 1, 0, random.Random(3))
    assert len(child) == 6
    for index in range(3):
        assert Counter(child[2 * index:2 * index + 2]) == Counter((g1[index], g2[index]))


def test_umad_crossover_full_deletion_empties_genome():
    assert umad_crossover((Op.X, 1), (0, 1), 0.5, 1, random.Random(0)) == ()


def test_uniform_crossover_picks_per_position_and_appends_tail_head():
    g1 = (1, 1, 1)
    g2 = (0, 0, 0, Op.X, Op.ADD, Op.MUL)
    for seed in range(50):
        child = uniform_crossover(g1, g2, random.Random(seed))
        assert 3 <= len(child) <= 6
        assert all(gene in (0, 1) for gene in child[:3])
        assert child[3:] == g2[3:len(child)]


def test_uniform_crossover_equal_lengths_has_no_tail():
    g1 = (1, 1, 1, 1)
    g2 = (0, 0, 0, 0)
    for seed in range(20):
        assert len(uniform_crossover(g1, g2, random.Random(seed))) == 4


def test_crossover_dispatch():
    g = (Op.X, 1, Op.ADD)
    for strategy in ('umad', 'single-point', 'uniform'):
        assert crossover(g, g, strategy, 0, 0, random.Random(0)) == g
    with pytest.raises(ConfigurationError):
        crossover(g, g, 'two-point', 0, 0, random.Random(0))
