# topmark:header:start
#
#   project      : ThemeKit
#   file         : columns.py
#   file_relpath : src/themekit/cli/commands/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit `columns` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from themekit.cli.cmd_common import get_console
from themekit.cli.options import OutputFormat, output_format_option
from themekit.layout import column_class

if TYPE_CHECKING:
    from collections.abc import Sequence

    from themekit.cli.console import ConsoleLike


@click.command(
    name="columns",
    help="Print CLASSES plus the '-first' classes for the item at --index.",
)
@click.argument("classes", nargs=-1, required=True)
@click.option(
    "-i",
    "--index",
    "current_index",
    type=int,
    default=None,
    help="Position of the item in its loop; omit to print CLASSES unchanged.",
)
@output_format_option
@click.pass_context
def columns_command(
    ctx: click.Context,
    classes: tuple[str, ...],
    current_index: int | None,
    output_format: str,
) -> None:
    """Print the grid classes for one item."""
    console: ConsoleLike = get_console(ctx)
    result: Sequence[str] = column_class(list(classes), current_index, join=False)
    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(json.dumps(list(result)))
    else:
        console.print(" ".join(result))
