"""
tests/test_genome.py - Individuals and serialization
"""
import random

import pytest

from intseq_gp.genome import Individual, random_genome
from intseq_gp.instructions import INGREDIENTS, Op
from intseq_gp.sequences import get_test_pairs

PAIRS = get_test_pairs('simple')


def test_error_is_computed_from_genome():
    assert Individual([Op.X], PAIRS).error == 0
    assert Individual([1], PAIRS).error == sum(abs(n - 1) for n, _ in PAIRS)


def test_individual_is_read_only():
    individual = Individual([Op.X], PAIRS)
    with pytest.raises(AttributeError):
        individual.error = 5
    with pytest.raises(AttributeError):
        individual.genome = (1,)


def test_genome_is_copied_into_a_tuple():
    genes = [Op.X, 1, Op.ADD]
    individual = Individual(genes, PAIRS)
    genes.append(Op.MUL)
    assert individual.genome == (Op.X, 1, Op.ADD)


def test_equality_and_hash_follow_genome_and_error():
    a = Individual([Op.X], PAIRS)
    b = Individual((Op.X,), PAIRS)
    c = Individual([Op.X, 0, Op.ADD], PAIRS)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_random_genome_uses_ingredients():
    genome = random_genome(50, random.Random(3))
    assert len(genome) == 50
    assert all(gene in INGREDIENTS for gene in genome)


def test_create_random_individual():
    individual = Individual.create_random(PAIRS, random.Random(0))
    assert len(individual) == 5


def test_json_round_trip_rescores(tmp_path):
    individual = Individual([Op.X, Op.X, Op.MUL], PAIRS)
    path = tmp_path / 'best.json'
    individual.to_json(str(path))

    loaded = Individual.from_json(get_test_pairs('A000290'), filename=str(path))
    assert loaded.genome == individual.genome
    assert loaded.error == 0


def test_from_dict_ignores_stored_error():
    loaded = Individual.from_dict({'genome': ['x'], 'error': 999}, PAIRS)
    assert loaded.error == 0
