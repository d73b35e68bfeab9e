"""
intseq_gp/sequences.py - Catalog of target integer sequences
"""
from typing import Callable, Dict, List, Tuple

from .fitness import TestPair

DEFAULT_INPUTS = range(20)


class UnknownSequenceError(KeyError):
    """Raised for a sequence id that is not in the catalog"""


# id -> (description, a(n))
SEQUENCES: Dict[str, Tuple[str, Callable[[int], int]]] = {
    'simple': ('a(n) = n', lambda n: n),
    'A000217': ('Triangular numbers: a(n) = n(n+1)/2', lambda n: n * (n + 1) // 2),
    'A000290': ('The squares: a(n) = n^2', lambda n: n * n),
    'A000292': ('Tetrahedral numbers: a(n) = n(n+1)(n+2)/6',
                lambda n: n * (n + 1) * (n + 2) // 6),
    'A000578': ('The cubes: a(n) = n^3', lambda n: n ** 3),
    'A037270': ('a(n) = n^2(n^2+1)/2', lambda n: n * n * (n * n + 1) // 2),
}


def _lookup(seq_id: str) -> str:
    token = str(seq_id).strip().lstrip(':')
    for name in SEQUENCES:
        if name.lower() == token.lower():
            return name
    raise UnknownSequenceError(
        f"Unknown sequence {seq_id!r}, expected one of: {', '.join(SEQUENCES)}")


def get_test_pairs(seq_id: str) -> Tuple[TestPair, ...]:
    """(n, a(n)) pairs for the named sequence"""
    _, term = SEQUENCES[_lookup(seq_id)]
    return tuple((n, term(n)) for n in DEFAULT_INPUTS)


def describe(seq_id: str) -> str:
    return SEQUENCES[_lookup(seq_id)][0]


def available_sequences() -> List[str]:
    return list(SEQUENCES)
