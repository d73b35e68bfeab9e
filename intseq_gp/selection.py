"""
intseq_gp/selection.py - Parent selection strategies
"""
import random
from typing import Iterable, Sequence

from .config import ConfigurationError
from .fitness import TestPair, case_error
from .genome import Individual


def tournament_selection(individuals: Sequence[Individual], rng: random.Random) -> Individual:
    """Draw two individuals with replacement and keep the one with lower error.

    On equal error the first draw wins.
    """
    first = rng.choice(individuals)
    second = rng.choice(individuals)
    return second if second.error < first.error else first


def lexicase_selection(individuals: Iterable[Individual], test_pairs: Iterable[TestPair],
                       rng: random.Random) -> Individual:
    """Filter distinct individuals through the test cases in random order.

    After each case only the candidates with the lowest error on it survive.
    Stops when one candidate is left or the cases run out, then picks
    uniformly among the survivors.
    """
    candidates = list(dict.fromkeys(individuals))
    cases = list(test_pairs)
    rng.shuffle(cases)

    for x, expected in cases:
        if len(candidates) == 1:
            break
        errors = [case_error(candidate.genome, x, expected) for candidate in candidates]
        lowest = min(errors)
        candidates = [candidate for candidate, error in zip(candidates, errors)
                      if error == lowest]

    return rng.choice(candidates)


def select(population: Sequence[Individual], test_pairs: Iterable[TestPair],
           strategy: str, rng: random.Random) -> Individual:
    """Pick one parent; the population is left untouched"""
    if strategy == 'tournament':
        return tournament_selection(population, rng)
    elif strategy == 'lexicase':
        return lexicase_selection(population, test_pairs, rng)
    else:
        raise ConfigurationError(f"Unknown selection strategy: {strategy!r}")
