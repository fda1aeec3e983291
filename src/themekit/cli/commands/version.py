# topmark:header:start
#
#   project      : ThemeKit
#   file         : version.py
#   file_relpath : src/themekit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit `version` command.

Prints the ThemeKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from themekit.cli.cmd_common import get_console, get_effective_verbosity
from themekit.cli.options import OutputFormat, output_format_option
from themekit.constants import THEMEKIT_VERSION

if TYPE_CHECKING:
    from themekit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ThemeKit.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: str) -> None:
    """Show the current version of ThemeKit.

    Args:
        ctx (click.Context): Click context.
        output_format (str): ``default`` or ``json``.
    """
    console: ConsoleLike = get_console(ctx)

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(json.dumps({"version": THEMEKIT_VERSION}))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("ThemeKit version:", bold=True, underline=True))
        console.print(f"    {console.styled(THEMEKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(THEMEKIT_VERSION, bold=True))
