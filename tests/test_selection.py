"""
tests/test_selection.py - Tournament and lexicase selection
"""
import random

import pytest

from intseq_gp.config import ConfigurationError
from intseq_gp.fitness import case_error
from intseq_gp.genome import Individual
from intseq_gp.instructions import Op, parse_genome
from intseq_gp.selection import lexicase_selection, select, tournament_selection
from intseq_gp.sequences import get_test_pairs

PAIRS = get_test_pairs('A000217')


class ScriptedRandom(random.Random):
    """Random whose choice() returns the given items in order"""

    def __init__(self, picks):
        super().__init__(0)
        self.picks = list(picks)

    def choice(self, seq):
        return self.picks.pop(0)


def make(text, pairs=PAIRS):
    return Individual(parse_genome(text), pairs)


def test_tournament_returns_lower_error_of_the_two_draws():
    good = make('x x *')
    bad = make('1')
    assert good.error < bad.error
    population = [good, bad]
    assert tournament_selection(population, ScriptedRandom([bad, good])) is good
    assert tournament_selection(population, ScriptedRandom([good, bad])) is good


def test_tournament_tie_returns_first_draw():
    first = make('x')
    second = make('x 0 +')
    assert first.error == second.error
    assert tournament_selection([first, second], ScriptedRandom([first, second])) is first


def test_tournament_result_is_never_worse_than_both_draws():
    rng = random.Random(7)
    population = [Individual.create_random(PAIRS, rng) for _ in range(20)]
    for seed in range(200):
        draw_rng = random.Random(seed)
        drawn = [draw_rng.choice(population), draw_rng.choice(population)]
        chosen = tournament_selection(population, random.Random(seed))
        assert chosen.error == min(individual.error for individual in drawn)


def test_lexicase_with_one_case_returns_a_case_minimum():
    pairs = [(5, 5)]
    population = [make(text, pairs) for text in ('x', '1', '0', 'x 1 +', 'x 0 +', '+')]
    lowest = min(case_error(individual.genome, 5, 5) for individual in population)
    for seed in range(50):
        chosen = lexicase_selection(population, pairs, random.Random(seed))
        assert case_error(chosen.genome, 5, 5) == lowest
        assert chosen.genome in ((Op.X,), parse_genome('x 0 +'))


def test_lexicase_prefers_the_elite_on_every_case():
    population = [make('x'), make('1'), make('x x *'), make('x 1 1 + /')]
    exact = make('x x * x + 1 1 + /')
    assert exact.error == 0
    population.append(exact)
    for seed in range(20):
        assert lexicase_selection(population, PAIRS, random.Random(seed)) is exact


def test_lexicase_collapses_clones_before_choosing():
    clone = make('x')
    other = make('x 0 +')
    population = [clone] * 99 + [other]
    rng = random.Random(0)
    picks = [lexicase_selection(population, PAIRS, rng) for _ in range(2000)]
    others = sum(1 for pick in picks if pick is other)
    assert 800 < others < 1200


def test_select_dispatches_and_leaves_population_alone():
    population = [make('x'), make('x x *'), make('1')]
    before = list(population)
    for strategy in ('tournament', 'lexicase'):
        chosen = select(population, PAIRS, strategy, random.Random(1))
        assert chosen in population
    assert population == before


def test_select_rejects_unknown_strategy():
    with pytest.raises(ConfigurationError):
        select([make('x')], PAIRS, 'roulette', random.Random(0))
