# topmark:header:start
#
#   project      : ThemeKit
#   file         : config.py
#   file_relpath : src/themekit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit `config` command.

Dumps the effective configuration (defaults, discovered files, ``--config``
files) as TOML, or as JSON with ``--format json``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from themekit.cli.cmd_common import build_config, get_console
from themekit.cli.options import OutputFormat, output_format_option
from themekit.config.io import to_toml

if TYPE_CHECKING:
    from themekit.cli.console import ConsoleLike
    from themekit.config.model import Config


@click.command(
    name="config",
    help="Show the effective ThemeKit configuration.",
)
@output_format_option
@click.pass_context
def config_command(ctx: click.Context, output_format: str) -> None:
    """Show the merged configuration.

    Args:
        ctx (click.Context): Click context.
        output_format (str): ``default`` (TOML) or ``json``.
    """
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(ctx)

    if OutputFormat(output_format) == OutputFormat.JSON:
        payload: dict[str, object] = {
            "config_files": [str(p) for p in config.config_files],
            **config.to_toml_dict(),
        }
        console.print(json.dumps(payload, indent=2))
        return

    for path in config.config_files:
        console.print(f"# from {path}")
    console.print(to_toml(config.to_toml_dict()))
