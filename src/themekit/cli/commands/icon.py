# topmark:header:start
#
#   project      : ThemeKit
#   file         : icon.py
#   file_relpath : src/themekit/cli/commands/icon.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit `icon` command.

Renders an icon from the configured catalog as inline SVG, or lists the
icons of the catalog.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from themekit.cli.cmd_common import build_config, get_console, report_diagnostics
from themekit.cli.errors import ThemekitDataError, ThemekitFileNotFoundError, ThemekitUsageError
from themekit.cli.options import OutputFormat, output_format_option
from themekit.icons import IconRenderer, IconRewriteError

if TYPE_CHECKING:
    from themekit.cli.console import ConsoleLike
    from themekit.config.model import Config
    from themekit.icons import IconResult


@click.command(
    name="icon",
    help="Render NAME from the icon catalog as inline SVG.",
)
@click.argument("name", required=False)
@click.option("-g", "--group", default=None, help="Icon group (default from config).")
@click.option(
    "-s",
    "--size",
    type=click.IntRange(min=1),
    default=None,
    help="Width and height in pixels (default from config).",
)
@click.option("--class", "css_class", default=None, help="Extra CSS classes.")
@click.option("--label", default=None, help="Accessible label; makes the icon non-decorative.")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Icon catalog directory (overrides config).",
)
@click.option("--strict", is_flag=True, help="Fail on icon sources without a leading <svg tag.")
@click.option("--list", "list_icons", is_flag=True, help="List available icons instead.")
@output_format_option
@click.pass_context
def icon_command(
    ctx: click.Context,
    name: str | None,
    group: str | None,
    size: int | None,
    css_class: str | None,
    label: str | None,
    root: Path | None,
    strict: bool,
    list_icons: bool,
    output_format: str,
) -> None:
    """Render an icon, or list the catalog with ``--list``."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(
        ctx, {"icon_root": root, "icon_strict": True if strict else None}
    )
    renderer: IconRenderer = IconRenderer.from_config(config)
    fmt = OutputFormat(output_format)

    if list_icons:
        groups: list[str] = [group] if group else renderer.catalog.groups()
        listing: dict[str, list[str]] = {g: renderer.catalog.icons(g) for g in groups}
        if fmt == OutputFormat.JSON:
            console.print(json.dumps(listing))
        else:
            for g, names in listing.items():
                for icon_name in names:
                    console.print(f"{g}/{icon_name}")
        return

    if not name:
        raise ThemekitUsageError("Missing icon NAME (or pass --list).")

    try:
        result: IconResult | None = renderer.render_result(name, group, size, css_class, label)
    except IconRewriteError as exc:
        raise ThemekitDataError(str(exc)) from exc
    if result is None:
        raise ThemekitFileNotFoundError(
            f"Icon not found: {group or renderer.default_group}/{name} in {renderer.catalog.root}"
        )

    report_diagnostics(console, result.diagnostics)

    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps(
                {
                    "icon": name,
                    "group": group or renderer.default_group,
                    "path": str(result.path),
                    "rewritten": result.rewritten,
                    "markup": result.markup,
                }
            )
        )
    else:
        console.print(result.markup)
