"""CLI command: atomizer parse -- find atomic classes in markup files."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from atomizer.cli.common import read_json
from atomizer.errors import AtomizerError
from atomizer.parser import parse as parse_text
from atomizer.reverse import build_config


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Base configuration; prints the rebuilt configuration as JSON.",
)
@click.option("--counts", is_flag=True, help="Print how often each class occurs.")
@click.option("--strict", is_flag=True, help="Fail on classes that map to no rule.")
def parse(files: tuple[str, ...], config_file: str | None, counts: bool, strict: bool) -> None:
    """Scan FILES for atomic class names."""
    occurrences: dict[str, int] = {}
    classes: list[str] = []
    for name in files:
        for cls in parse_text(Path(name).read_text(encoding="utf-8"), occurrences):
            if cls not in classes:
                classes.append(cls)

    if config_file:
        try:
            config = build_config(classes, read_json(config_file), strict=strict)
        except AtomizerError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
        click.echo(json.dumps(config.to_dict(), indent=2))
        return

    for cls in classes:
        if counts:
            click.echo(f"{cls}\t{occurrences[cls]}")
        else:
            click.echo(cls)
