"""CLI command: atomizer build -- compile a JSON configuration into CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from atomizer.cli.common import read_json
from atomizer.errors import AtomizerError
from atomizer.render import RenderOptions, create_css


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the CSS to this file instead of stdout.",
)
@click.option(
    "--require",
    "-r",
    multiple=True,
    help="Module name or .py file defining register(api); repeatable.",
)
def build(config_file: str, output: str | None, require: tuple[str, ...]) -> None:
    """Compile CONFIG_FILE (JSON) into atomic CSS."""
    configuration = read_json(config_file)
    try:
        css = create_css(configuration, RenderOptions(require=require))
    except AtomizerError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(css, nl=False)
