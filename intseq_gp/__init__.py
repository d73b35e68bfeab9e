"""
intseq_gp - Genetic programming for integer sequences

Evolves small stack programs (genomes) whose output on n matches the terms
a(n) of a target sequence, using tournament or lexicase selection, UMAD
mutation and crossover.
"""

__version__ = "0.1.0"
__author__ = "intseq-gp Project"

from .instructions import Op, INGREDIENTS, CONSTANTS, parse_genome, format_genome
from .interpreter import OVERFLOW, run
from .fitness import PENALTY, case_error, case_errors, total_error
from .genome import Individual, random_genome
from .selection import select, tournament_selection, lexicase_selection
from .variation import (mutate, crossover, umad_crossover, single_point_crossover,
                        uniform_crossover)
from .population import Population
from .config import GPConfig, ConfigurationError
from .evolution import gp
from .report import GenerationReport, ConsoleReporter, RunLog
from .sequences import get_test_pairs, available_sequences

__all__ = [
    'Op', 'INGREDIENTS', 'CONSTANTS', 'parse_genome', 'format_genome',
    'OVERFLOW', 'run',
    'PENALTY', 'case_error', 'case_errors', 'total_error',
    'Individual', 'random_genome',
    'select', 'tournament_selection', 'lexicase_selection',
    'mutate', 'crossover', 'umad_crossover', 'single_point_crossover', 'uniform_crossover',
    'Population',
    'GPConfig', 'ConfigurationError',
    'gp',
    'GenerationReport', 'ConsoleReporter', 'RunLog',
    'get_test_pairs', 'available_sequences'
]
