"""
intseq_gp/config.py - Run configuration and validation
"""
from typing import Any, Dict, Iterable, Optional, Sequence

from .instructions import INGREDIENTS, format_genome, parse_genome

SELECTION_STRATEGIES = ('tournament', 'lexicase')
CROSSOVER_STRATEGIES = ('umad', 'single-point', 'uniform')


class ConfigurationError(ValueError):
    """Raised for settings that make a run impossible"""


def normalize_strategy(name: str, choices: Sequence[str], suffix: str) -> str:
    """Map 'lexicase', 'Lexicase', ':lexicase-selection' ... to 'lexicase'"""
    token = str(name).strip().lstrip(':').lower().replace('_', '-')
    if token.endswith(suffix):
        token = token[:-len(suffix)]
    if token not in choices:
        raise ConfigurationError(
            f"Unknown strategy {name!r}, expected one of: {', '.join(choices)}")
    return token


def normalize_selection(name: str) -> str:
    return normalize_strategy(name, SELECTION_STRATEGIES, '-selection')


def normalize_crossover(name: str) -> str:
    return normalize_strategy(name, CROSSOVER_STRATEGIES, '-crossover')


class GPConfig:
    """Settings for a single genetic programming run"""

    def __init__(self, population_size: int = 200, generations: int = 200,
                 selection: str = 'lexicase', crossover: bool = True,
                 crossover_type: str = 'uniform', mutate: bool = True,
                 add_rate: float = 0.09, del_rate: float = 0.1,
                 elitism: bool = True, seed: Optional[int] = None,
                 ingredients: Optional[Iterable[Any]] = None,
                 initial_genome_length: int = 5):
        self.population_size = population_size
        self.generations = generations
        self.selection = selection
        self.crossover = crossover
        self.crossover_type = crossover_type
        self.mutate = mutate
        self.add_rate = add_rate
        self.del_rate = del_rate
        self.elitism = elitism
        self.seed = seed
        if ingredients is None:
            self.ingredients = INGREDIENTS
        else:
            try:
                self.ingredients = parse_genome(ingredients)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        self.initial_genome_length = initial_genome_length

    def validate(self) -> 'GPConfig':
        """Check every field, normalizing strategy names in place"""
        if not isinstance(self.population_size, int) or self.population_size < 1:
            raise ConfigurationError(
                f"population_size must be a positive integer, got {self.population_size!r}")
        if not isinstance(self.generations, int) or self.generations < 0:
            raise ConfigurationError(
                f"generations must be a non-negative integer, got {self.generations!r}")
        if not isinstance(self.initial_genome_length, int) or self.initial_genome_length < 0:
            raise ConfigurationError(
                f"initial_genome_length must be a non-negative integer, "
                f"got {self.initial_genome_length!r}")

        self.selection = normalize_selection(self.selection)
        self.crossover_type = normalize_crossover(self.crossover_type)

        for name in ('add_rate', 'del_rate'):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {rate!r}")

        if not self.ingredients:
            raise ConfigurationError("ingredients must not be empty")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            'population_size': self.population_size,
            'generations': self.generations,
            'selection': self.selection,
            'crossover': self.crossover,
            'crossover_type': self.crossover_type,
            'mutate': self.mutate,
            'add_rate': self.add_rate,
            'del_rate': self.del_rate,
            'elitism': self.elitism,
            'seed': self.seed,
            'ingredients': format_genome(self.ingredients),
            'initial_genome_length': self.initial_genome_length,
        }

    def __repr__(self):
        fields = ', '.join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"GPConfig({fields})"
