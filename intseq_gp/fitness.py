"""
intseq_gp/fitness.py - Error of a genome against test pairs
"""
from typing import Any, Iterable, List, Sequence, Tuple

from .interpreter import OVERFLOW, run

# Error charged for a case that overflows or leaves nothing on the stack
PENALTY = 10_000_000

TestPair = Tuple[int, int]


def case_error(genome: Sequence[Any], x: int, expected: int):
    """Absolute error of genome on a single (x, expected) case"""
    result = run(genome, x)
    if result is OVERFLOW or result is None:
        return PENALTY
    try:
        return abs(expected - result)
    except (TypeError, OverflowError):
        return PENALTY


def case_errors(genome: Sequence[Any], test_pairs: Iterable[TestPair]) -> List:
    """Per-case errors, in test pair order"""
    return [case_error(genome, x, expected) for x, expected in test_pairs]


def total_error(genome: Sequence[Any], test_pairs: Iterable[TestPair]):
    """Sum of the per-case errors"""
    return sum(case_errors(genome, test_pairs))
