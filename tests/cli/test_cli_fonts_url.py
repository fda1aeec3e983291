# topmark:header:start
#
#   project      : ThemeKit
#   file         : test_cli_fonts_url.py
#   file_relpath : tests/cli/test_cli_fonts_url.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `fonts-url` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_fonts_url_defaults(isolation: Path) -> None:
    """Without options the default theme font is requested."""
    result = run_cli_in(isolation, ["fonts-url"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == (
        "https://fonts.googleapis.com/css"
        "?family=Source+Sans+Pro:400,400i,700,700i&subset=latin,latin-ext"
    )


@mark_cli
def test_fonts_url_options_override_config(isolation: Path) -> None:
    """``--family`` replaces the configured families; the subset stays configured."""
    (isolation / "themekit.toml").write_text(
        '[fonts]\nfamilies = ["Lato:400"]\nsubset = "latin"\n', encoding="utf-8"
    )
    result = run_cli_in(
        isolation, ["fonts-url", "--family", "Merriweather:700", "--family", "Lato:400"]
    )

    assert_SUCCESS(result)
    assert result.stdout.strip().endswith("?family=Merriweather:700|Lato:400&subset=latin")


@mark_cli
def test_fonts_url_json_from_config(isolation: Path) -> None:
    """Configured families are used when no option is given."""
    (isolation / "themekit.toml").write_text('[fonts]\nfamilies = ["Lato:400"]\n', encoding="utf-8")
    result = run_cli_in(isolation, ["fonts-url", "--subset", "", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"url": "https://fonts.googleapis.com/css?family=Lato:400"}
