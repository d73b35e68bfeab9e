"""
intseq_gp/cli.py - Command-line interface
"""
import logging
import random

import click

from .config import (CROSSOVER_STRATEGIES, SELECTION_STRATEGIES, ConfigurationError,
                     GPConfig, normalize_crossover, normalize_selection)
from .evolution import gp
from .genome import Individual
from .interpreter import describe
from .report import ConsoleReporter, RunLog, chain_reporters
from .sequences import UnknownSequenceError, available_sequences, get_test_pairs
from .sequences import describe as describe_sequence


class StrategyChoice(click.ParamType):
    """Strategy token; accepts the long forms such as ':lexicase-selection'"""

    name = 'strategy'

    def __init__(self, normalize, choices):
        self.normalize = normalize
        self.choices = choices

    def convert(self, value, param, ctx):
        try:
            return self.normalize(value)
        except ConfigurationError as e:
            self.fail(str(e), param, ctx)

    def get_metavar(self, param, ctx=None):
        return '[' + '|'.join(self.choices) + ']'


SELECTION = StrategyChoice(normalize_selection, SELECTION_STRATEGIES)
CROSSOVER = StrategyChoice(normalize_crossover, CROSSOVER_STRATEGIES)


def _sequence_pairs(sequence, param_hint):
    try:
        return get_test_pairs(sequence)
    except UnknownSequenceError as e:
        raise click.BadParameter(e.args[0], param_hint=param_hint)


@click.group()
def cli():
    """intseq-gp - Evolve stack programs that reproduce integer sequences"""
    pass


@cli.command()
@click.argument('population_size', type=int)
@click.argument('generations', type=int)
@click.argument('sequence')
@click.argument('selection', type=SELECTION)
@click.argument('crossover', type=click.BOOL)
@click.argument('crossover_type', type=CROSSOVER)
@click.argument('mutate', type=click.BOOL)
@click.argument('add_rate', type=float)
@click.argument('del_rate', type=float)
@click.argument('elitism', type=click.BOOL)
@click.option('--seed', type=int, default=None, help='Seed for the random generator')
@click.option('--every', default=1, help='Print a report line every N generations')
@click.option('--log', 'log_file', default=None, help='Write the run log (JSON) to this file')
@click.option('--out', '-o', default=None, help='Write the best individual (JSON) to this file')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def run(population_size, generations, sequence, selection, crossover, crossover_type,
        mutate, add_rate, del_rate, elitism, seed, every, log_file, out, verbose):
    """Run genetic programming against a named sequence.

    Example: intseq-gp run 200 200 simple lexicase true uniform true 0.09 0.1 true
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    test_pairs = _sequence_pairs(sequence, "'SEQUENCE'")
    config = GPConfig(population_size=population_size, generations=generations,
                      selection=selection, crossover=crossover,
                      crossover_type=crossover_type, mutate=mutate,
                      add_rate=add_rate, del_rate=del_rate, elitism=elitism, seed=seed)
    try:
        config.validate()
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    if crossover and crossover_type == 'umad' and mutate:
        click.echo("Warning: umad crossover already adds and deletes genes; "
                   "mutation is usually disabled with it", err=True)

    click.echo(f"Sequence {sequence}: {describe_sequence(sequence)}")
    click.echo(f"Population {population_size}, generations {generations}, "
               f"{selection} selection, seed {seed}")

    run_log = RunLog() if log_file else None
    reporter = chain_reporters(ConsoleReporter(every=every), run_log)

    best = gp(config, test_pairs, rng=random.Random(seed), reporter=reporter)

    click.echo(f"\nBest individual: {best}")
    if best.error == 0:
        click.echo("Solution found.")

    if run_log is not None:
        run_log.save(log_file, config=config, best=best, sequence=sequence)
        click.echo(f"Run log saved: {log_file}")
    if out:
        best.to_json(out)
        click.echo(f"Best individual saved: {out}")


@cli.command()
def sequences():
    """List the available target sequences"""
    for name in available_sequences():
        terms = ', '.join(str(output) for _, output in get_test_pairs(name)[:8])
        click.echo(f"{name:10s} {describe_sequence(name)}")
        click.echo(f"{'':10s} {terms}, ...")


@cli.command()
@click.argument('genome_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('sequence')
@click.option('--verbose', '-v', is_flag=True, help='Show every test case')
def score(genome_file, sequence, verbose):
    """Re-score a saved individual on a sequence"""
    test_pairs = _sequence_pairs(sequence, "'SEQUENCE'")
    try:
        individual = Individual.from_json(test_pairs, filename=genome_file)
    except (ValueError, KeyError) as e:
        raise click.ClickException(f"Error loading genome: {e}")

    click.echo(f"Genome: [{' '.join(str(i) for i in individual.genome)}]")
    click.echo(f"Total error: {individual.error}")

    if verbose:
        for (x, expected), error in zip(test_pairs, individual.case_errors(test_pairs)):
            click.echo(f"  x={x:3d} expected={expected} got={describe(individual.genome, x)} "
                       f"error={error}")


if __name__ == '__main__':
    cli()
