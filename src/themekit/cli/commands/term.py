# topmark:header:start
#
#   project      : ThemeKit
#   file         : term.py
#   file_relpath : src/themekit/cli/commands/term.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit `term` command.

Resolves the representative term of a post from a JSON term data file (see
`themekit.terms.store` for the layout). Finding no term is not an error: the
command prints nothing and exits successfully.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from themekit.cli.cmd_common import build_config, get_console, get_effective_verbosity
from themekit.cli.errors import ThemekitDataError
from themekit.cli.options import OutputFormat, output_format_option
from themekit.terms import InMemoryTermStore, TermDataError, TermResolver

if TYPE_CHECKING:
    from themekit.cli.console import ConsoleLike
    from themekit.config.model import Config
    from themekit.terms import TermResolution


@click.command(
    name="term",
    help="Print the primary term of a post from the term data in DATA_FILE.",
)
@click.argument(
    "data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("-p", "--post-id", required=True, help="Identifier of the post.")
@click.option("-t", "--taxonomy", default=None, help="Taxonomy (default from config).")
@click.option(
    "-f",
    "--field",
    default=None,
    help="Print this term field (e.g. slug, name, term_id) instead of the name.",
)
@click.option(
    "--no-primary",
    is_flag=True,
    help="Ignore primary-term designations in DATA_FILE.",
)
@output_format_option
@click.pass_context
def term_command(
    ctx: click.Context,
    data_file: Path,
    post_id: str,
    taxonomy: str | None,
    field: str | None,
    no_primary: bool,
    output_format: str,
) -> None:
    """Resolve and print the representative term of a post."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(ctx, {"taxonomy": taxonomy})

    try:
        store: InMemoryTermStore = InMemoryTermStore.from_json_file(data_file)
    except TermDataError as exc:
        raise ThemekitDataError(str(exc)) from exc

    resolver = TermResolver(
        store, None if no_primary else store, default_taxonomy=config.taxonomy
    )
    resolution: TermResolution = resolver.lookup(post_id=post_id)

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(
            json.dumps(
                {
                    "post_id": post_id,
                    "taxonomy": config.taxonomy,
                    "source": resolution.source.value,
                    "term": resolution.term.to_dict() if resolution.term else None,
                }
            )
        )
        return

    verbose: bool = get_effective_verbosity(ctx) <= logging.INFO
    if resolution.term is None:
        if verbose:
            console.warn(f"No {config.taxonomy!r} term for post {post_id!r}.")
        return

    value: object | None = resolution.term.get_field(field) if field else None
    if value is None:
        if field:
            console.warn(f"Term has no field {field!r}; printing its name.")
        value = resolution.term.display_name
    console.print(str(value))
    if verbose:
        console.warn(f"(chosen by {resolution.source.value})")
