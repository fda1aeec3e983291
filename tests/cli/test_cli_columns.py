# topmark:header:start
#
#   project      : ThemeKit
#   file         : test_cli_columns.py
#   file_relpath : tests/cli/test_cli_columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `columns` command."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_columns_with_index() -> None:
    """The derived classes follow the given ones."""
    result = run_cli(["columns", "col-lg-4", "col-md-6", "--index", "12"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == "col-lg-4 col-md-6 col-md-first col-lg-first"


@mark_cli
def test_columns_without_index_echoes_classes() -> None:
    """Without ``--index`` the classes are printed unchanged."""
    result = run_cli(["columns", "col-md-6"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == "col-md-6"


@mark_cli
def test_columns_json() -> None:
    """``--format json`` prints a list."""
    result = run_cli(["columns", "col-md-6", "-i", "2", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == ["col-md-6", "col-md-first"]


@mark_cli
def test_columns_requires_classes() -> None:
    """At least one class is required (Click usage error)."""
    result = run_cli(["columns"])
    assert result.exit_code == 2
