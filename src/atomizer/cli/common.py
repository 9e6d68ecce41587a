"""Helpers shared by CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click


def read_json(path: str | Path) -> Any:
    """Read a JSON configuration file, turning bad JSON into a usage error."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(
            f"{path}: invalid JSON at line {exc.lineno}: {exc.msg}"
        ) from exc
