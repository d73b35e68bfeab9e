"""
intseq_gp/genome.py - Individuals (genome + error) and JSON serialization
"""
import json
import random
from typing import Any, Dict, Iterable, Sequence, Tuple

from .fitness import TestPair, case_errors, total_error
from .instructions import INGREDIENTS, Instruction, format_genome, parse_genome

Genome = Tuple[Instruction, ...]


def random_genome(length: int, rng: random.Random,
                  ingredients: Sequence[Instruction] = INGREDIENTS) -> Genome:
    """Genome of the given length drawn i.i.d. from ingredients"""
    return tuple(rng.choice(ingredients) for _ in range(length))


class Individual:
    """A genome together with its total error on a set of test pairs.

    The error is computed from the genome when the individual is created and
    both are read-only afterwards, so they cannot drift apart. Variation
    always builds a new Individual.
    """

    __slots__ = ('_genome', '_error')

    def __init__(self, genome: Iterable[Instruction], test_pairs: Iterable[TestPair]):
        self._genome = tuple(genome)
        self._error = total_error(self._genome, test_pairs)

    @classmethod
    def create_random(cls, test_pairs: Iterable[TestPair], rng: random.Random, length: int = 5,
                      ingredients: Sequence[Instruction] = INGREDIENTS) -> 'Individual':
        return cls(random_genome(length, rng, ingredients), test_pairs)

    @property
    def genome(self) -> Genome:
        return self._genome

    @property
    def error(self):
        return self._error

    def __len__(self) -> int:
        return len(self._genome)

    def __eq__(self, other):
        if not isinstance(other, Individual):
            return NotImplemented
        return self._genome == other._genome and self._error == other._error

    def __hash__(self):
        return hash((self._genome, self._error))

    def case_errors(self, test_pairs: Iterable[TestPair]):
        return case_errors(self._genome, test_pairs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize individual to dictionary"""
        return {
            'genome': format_genome(self._genome),
            'error': self._error,
            'size': len(self._genome),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], test_pairs: Iterable[TestPair]) -> 'Individual':
        """Rebuild an individual, re-scoring its genome on test_pairs"""
        return cls(parse_genome(data['genome']), test_pairs)

    def to_json(self, filename: str = None) -> str:
        """Serialize to JSON string or file"""
        json_str = json.dumps(self.to_dict(), indent=2)
        if filename:
            with open(filename, 'w') as f:
                f.write(json_str)
        return json_str

    @classmethod
    def from_json(cls, test_pairs: Iterable[TestPair], json_data: str = None,
                  filename: str = None) -> 'Individual':
        """Deserialize from JSON string or file"""
        if filename:
            with open(filename, 'r') as f:
                json_data = f.read()

        data = json.loads(json_data)
        return cls.from_dict(data, test_pairs)

    def __repr__(self):
        return f"Individual(error={self._error!r}, genome={format_genome(self._genome)!r})"

    def __str__(self):
        return f"error {self._error}: [{' '.join(format_genome(self._genome))}]"
