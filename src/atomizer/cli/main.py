"""Atomizer CLI entry point: Click group with subcommands."""

import logging

import click

from atomizer import __version__


@click.group()
@click.version_option(version=__version__, prog_name="atomizer")
@click.option("--verbose", "-v", is_flag=True, help="Log skipped classes and rules.")
def cli(verbose: bool) -> None:
    """Atomizer - atomic CSS generator and class-name extractor."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from atomizer.cli.build import build  # noqa: E402
from atomizer.cli.parse import parse  # noqa: E402

cli.add_command(build)
cli.add_command(parse)
