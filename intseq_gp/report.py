"""
intseq_gp/report.py - Per-generation reports, console output and run logs
"""
import json
import os
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import click

from .instructions import format_genome

Reporter = Callable[['GenerationReport'], None]


class GenerationReport:
    """Snapshot of one generation handed to reporters"""

    __slots__ = ('generation', 'best_error', 'diversity', 'average_genome_length', 'best_genome')

    def __init__(self, generation: int, best_error, diversity: float,
                 average_genome_length: float, best_genome: tuple):
        self.generation = generation
        self.best_error = best_error
        self.diversity = diversity
        self.average_genome_length = average_genome_length
        self.best_genome = best_genome

    @classmethod
    def from_population(cls, population) -> 'GenerationReport':
        best = population.best()
        return cls(population.generation, best.error, population.diversity(),
                   population.average_genome_length(), best.genome)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generation': self.generation,
            'best_error': self.best_error,
            'diversity': self.diversity,
            'average_genome_length': self.average_genome_length,
            'best_genome': format_genome(self.best_genome),
        }

    def __str__(self):
        return (f"Gen {self.generation:4d}: "
                f"Best={self.best_error} "
                f"Diversity={self.diversity:.3f} "
                f"AvgSize={self.average_genome_length:.2f} "
                f"Genome=[{' '.join(format_genome(self.best_genome))}]")


class ConsoleReporter:
    """Echo a report line every `every` generations and when a solution appears"""

    def __init__(self, every: int = 1, echo: Callable[[str], Any] = click.echo):
        self.every = max(1, every)
        self.echo = echo

    def __call__(self, report: GenerationReport) -> None:
        if report.generation % self.every == 0 or report.best_error == 0:
            self.echo(str(report))


class RunLog:
    """Collects generation reports and writes them as a JSON run log"""

    def __init__(self):
        self.reports: List[GenerationReport] = []
        self.started = time.time()

    def __call__(self, report: GenerationReport) -> None:
        self.reports.append(report)

    def to_dict(self, config=None, best=None, sequence: Optional[str] = None) -> Dict[str, Any]:
        return {
            'datetime': datetime.fromtimestamp(self.started).isoformat(),
            'elapsed': time.time() - self.started,
            'sequence': sequence,
            'config': config.to_dict() if config is not None else None,
            'generations': [report.to_dict() for report in self.reports],
            'best': best.to_dict() if best is not None else None,
        }

    def save(self, filename: str, config=None, best=None, sequence: Optional[str] = None) -> None:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, 'w') as f:
            json.dump(self.to_dict(config, best, sequence), f, indent=2)


def chain_reporters(*reporters: Optional[Reporter]) -> Reporter:
    """Fan a report out to several reporters, skipping None entries"""
    active = [reporter for reporter in reporters if reporter is not None]

    def report(generation_report: GenerationReport) -> None:
        for reporter in active:
            reporter(generation_report)

    return report
