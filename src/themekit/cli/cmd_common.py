# topmark:header:start
#
#   project      : ThemeKit
#   file         : cmd_common.py
#   file_relpath : src/themekit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by ThemeKit subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from themekit.cli.errors import ThemekitConfigError
from themekit.config.io import ConfigError
from themekit.config.logging import get_logger
from themekit.config.model import Config, MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from themekit.cli.console import ConsoleLike
    from themekit.config.logging import ThemekitLogger
    from themekit.diagnostic import Diagnostic

logger: ThemekitLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context."""
    return ctx.find_root().obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level stored on the root context."""
    return int(ctx.find_root().obj.get("verbosity_level", 0))


def build_config(ctx: click.Context, overrides: Mapping[str, Any] | None = None) -> Config:
    """Load and freeze the configuration for a command.

    Discovery starts at the current working directory unless ``--no-config``
    was given; files passed with ``--config`` are applied on top, then
    ``overrides`` (command options).

    Raises:
        ThemekitConfigError: If a config file cannot be read or parsed.
    """
    obj: dict[str, Any] = ctx.find_root().obj
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            Path.cwd(),
            extra_config_files=obj.get("config_files", ()),
            overrides=overrides,
            discover=not obj.get("no_config", False),
        )
    except ConfigError as exc:
        raise ThemekitConfigError(str(exc)) from exc
    config: Config = draft.freeze()

    report_diagnostics(get_console(ctx), config.diagnostics)
    return config


def report_diagnostics(console: ConsoleLike, diagnostics: Iterable[Diagnostic]) -> None:
    """Write each diagnostic to stderr as ``[level] message``, the tag colored by level."""
    for diag in diagnostics:
        console.note(f"{diag.level.color(f'[{diag.level.value}]')} {diag.message}")
