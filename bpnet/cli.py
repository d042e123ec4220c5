import logging
import sys

import click

from . import __version__
from .core.config import (
    DEFAULT_ALPHA, DEFAULT_ETA, DEFAULT_SMOOTHING_FACTOR, NetworkConfig)
from .core.exception import MalformedTopology, TargetSizeMismatch
from .core.logger import setup_logging
from .data.gates import GATES, make_dataset, write_training_file
from .trainer import train_from_file


logger = logging.getLogger("bpnet")

EXIT_STOPPED_EARLY = 1
EXIT_MALFORMED_TOPOLOGY = 2
EXIT_TARGET_SIZE_MISMATCH = 3


@click.group()
@click.version_option(__version__, prog_name="bpnet")
def cli():
    """Train a backpropagation neural network on tagged example files."""


@cli.command()
@click.argument("filename", type=click.Path(exists=True, dir_okay=False))
@click.option("--eta", type=float, default=DEFAULT_ETA, show_default=True,
              help="Overall net learning rate")
@click.option("--alpha", type=float, default=DEFAULT_ALPHA,
              show_default=True, help="Momentum")
@click.option("--smoothing-factor", type=float,
              default=DEFAULT_SMOOTHING_FACTOR, show_default=True,
              help="Number of samples the recent average error spans")
@click.option("--seed", type=int, default=None,
              help="Seed for the initial weights")
@click.option("--passes", type=click.IntRange(min=1), default=1,
              show_default=True, help="Passes over the training file")
@click.option("--progress-every", type=click.IntRange(min=0), default=1,
              show_default=True,
              help="Log progress every N examples (0 turns it off)")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Also write the log to this file")
@click.option("--plot", "plot_file", type=click.Path(dir_okay=False),
              default=None, help="Save a plot of the error history")
@click.option("--quiet", is_flag=True, help="Don't log to the console")
def train(filename, eta, alpha, smoothing_factor, seed, passes,
          progress_every, log_file, plot_file, quiet):
    """Train a network on FILENAME and print the final error."""
    setup_logging(filename=log_file, stdout=not quiet)

    try:
        config = NetworkConfig(
            eta=eta, alpha=alpha, smoothing_factor=smoothing_factor)
    except ValueError as e:
        raise click.BadParameter(str(e))

    try:
        network, report = train_from_file(
            filename, config=config, random_state=seed, n_passes=passes,
            progress_every=progress_every)
    except MalformedTopology as e:
        logger.error("Malformed topology in {}: {}".format(filename, e))
        click.echo("Error: malformed topology: {}".format(e), err=True)
        sys.exit(EXIT_MALFORMED_TOPOLOGY)
    except TargetSizeMismatch as e:
        logger.error("Bad target values in {}: {}".format(filename, e))
        click.echo("Error: {}".format(e), err=True)
        sys.exit(EXIT_TARGET_SIZE_MISMATCH)

    click.echo("Net recent average error: {:g}".format(
        network.get_recent_average_error()))

    if plot_file and report.error_history:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from .visualize import plot_error_history

        ax = plot_error_history(report.error_history)
        ax.figure.savefig(plot_file)
        plt.close(ax.figure)

    if report.stopped_early:
        click.echo("Stopped early: {}".format(report.stop_reason), err=True)
        sys.exit(EXIT_STOPPED_EARLY)


@cli.command("make-data")
@click.argument("filename", type=click.Path(dir_okay=False))
@click.option("--gate", type=click.Choice(sorted(GATES)), default="xor",
              show_default=True)
@click.option("--samples", type=click.IntRange(min=1), default=2000,
              show_default=True)
@click.option("--seed", type=int, default=None,
              help="Seed for the random inputs")
@click.option("--hidden", type=click.IntRange(min=1), default=4,
              show_default=True, help="Hidden layer size in the topology")
def make_data(filename, gate, samples, seed, hidden):
    """Write a two-input logical gate dataset to FILENAME."""
    inputs, targets = make_dataset(
        n_samples=samples, gate=gate, random_state=seed)
    write_training_file(filename, (2, hidden, 1), inputs, targets)
    click.echo("Wrote {} {} examples to {}".format(samples, gate, filename))


def main():
    cli()


if __name__ == "__main__":
    main()
