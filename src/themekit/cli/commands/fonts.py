# topmark:header:start
#
#   project      : ThemeKit
#   file         : fonts.py
#   file_relpath : src/themekit/cli/commands/fonts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit `fonts-url` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from themekit.cli.cmd_common import build_config, get_console
from themekit.cli.errors import ThemekitUsageError
from themekit.cli.options import OutputFormat, output_format_option
from themekit.fonts import theme_fonts_url

if TYPE_CHECKING:
    from themekit.cli.console import ConsoleLike
    from themekit.config.model import Config


@click.command(
    name="fonts-url",
    help="Print the web-font stylesheet URL for the configured font families.",
)
@click.option(
    "--family",
    "families",
    multiple=True,
    help="Font family in 'Name+Words:variants' form (repeatable; overrides config).",
)
@click.option("--subset", default=None, help="Character subsets (overrides config).")
@output_format_option
@click.pass_context
def fonts_url_command(
    ctx: click.Context,
    families: tuple[str, ...],
    subset: str | None,
    output_format: str,
) -> None:
    """Print the stylesheet URL loading the theme fonts."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(
        ctx, {"font_families": list(families) or None, "font_subset": subset}
    )
    try:
        url: str = theme_fonts_url(config.font_families, config.font_subset)
    except ValueError as exc:
        raise ThemekitUsageError(str(exc)) from exc

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(json.dumps({"url": url}))
    else:
        console.print(url)
