"""Compiler facade: configuration in, stylesheet text out."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Iterable, Mapping, Union

from atomizer.errors import ConfigurationError
from atomizer.model.config import Configuration
from atomizer.model.css import RuleBlock
from atomizer.model.rule import RuleDescriptor, RuleTable
from atomizer.render.media import group
from atomizer.render.renderer import format_block, render_class
from atomizer.resolver import load_configuration, require_settings, resolve
from atomizer.rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


class StyleApi:
    """Handed to ``require`` hooks so they can contribute to the output.

    Hooks may add literal blocks, which are written before the atomic rules,
    and extra rule descriptors, which join the rule table before resolution.
    """

    def __init__(self) -> None:
        self.blocks: list[RuleBlock] = []
        self.rules: list[RuleDescriptor] = []

    def add(
        self,
        selector: str,
        declarations: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> None:
        if isinstance(declarations, Mapping):
            declarations = declarations.items()
        pairs = tuple((str(p), str(v)) for p, v in declarations)
        self.blocks.append(RuleBlock(selector=selector, declarations=pairs))

    def add_rules(self, descriptors: Iterable[RuleDescriptor]) -> None:
        self.rules.extend(descriptors)


Hook = Callable[[StyleApi], None]
RequireSource = Union[str, Path, Hook]


@dataclass(frozen=True)
class RenderOptions:
    """Options for :func:`create_css`.

    Attributes:
        require: Hooks to run before resolution.  Each is a callable taking a
            :class:`StyleApi`, an importable module name, or a path to a
            ``.py`` file; modules must define ``register(api)``.
        rules: Extra rule descriptors appended to the rule table.
    """

    require: tuple[RequireSource, ...] = ()
    rules: tuple[RuleDescriptor, ...] = ()

    @classmethod
    def coerce(cls, options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
        if options is None:
            return cls()
        if isinstance(options, RenderOptions):
            return options
        return cls(
            require=tuple(options.get("require") or ()),
            rules=tuple(options.get("rules") or ()),
        )


def _load_module(source: str | Path) -> ModuleType:
    path = Path(source)
    if path.suffix == ".py":
        if not path.is_file():
            raise ConfigurationError(f"Required file not found: {path}", key="require")
        spec = importlib.util.spec_from_file_location(f"_atomizer_hook_{path.stem}", path)
        if spec is None or spec.loader is None:
            raise ConfigurationError(f"Cannot load required file: {path}", key="require")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    try:
        return importlib.import_module(str(source))
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import required module {source!r}: {exc}", key="require"
        ) from exc


def _resolve_hook(source: RequireSource) -> Hook:
    if callable(source):
        return source
    module = _load_module(source)
    hook = getattr(module, "register", None)
    if not callable(hook):
        raise ConfigurationError(
            f"Required module {source!s} does not define register(api)",
            key="require",
        )
    return hook


def run_hooks(sources: Iterable[RequireSource]) -> StyleApi:
    """Run every ``require`` hook against one shared :class:`StyleApi`."""
    api = StyleApi()
    for source in sources:
        logger.debug("Running require hook %r", source)
        _resolve_hook(source)(api)
    return api


def create_css(
    configuration: Configuration | Mapping[str, Any] | None,
    options: RenderOptions | Mapping[str, Any] | None = None,
    rules: RuleTable = DEFAULT_RULES,
) -> str:
    """Compile *configuration* into stylesheet text.

    Raises :class:`ConfigurationError` before running any hook when the
    configuration or its ``namespace``, ``start`` or ``end`` is missing.
    """
    config = load_configuration(configuration)
    settings = require_settings(config)
    opts = RenderOptions.coerce(options)

    api = run_hooks(opts.require)
    table = rules.extend(list(opts.rules) + api.rules)

    blocks: list[RuleBlock] = []
    for spec in resolve(table, config):
        blocks.extend(render_class(spec, settings.namespace))

    literal = "".join(format_block(block) for block in api.blocks)
    return literal + group(blocks, settings.break_points)
