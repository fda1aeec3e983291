# topmark:header:start
#
#   project      : ThemeKit
#   file         : test_cli_smoke.py
#   file_relpath : tests/cli/test_cli_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests: help output, subcommand registration and global flags."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize

COMMANDS: tuple[str, ...] = ("version", "icon", "columns", "term", "fonts-url", "config")


@mark_cli
def test_bare_invocation_prints_hint_and_help() -> None:
    """Running without a subcommand shows a hint and the group help."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint: use 'themekit icon NAME'" in result.stdout
    for name in COMMANDS:
        assert name in result.stdout


@mark_cli
@parametrize("name", COMMANDS)
def test_subcommand_help(name: str) -> None:
    """Every subcommand answers ``--help``."""
    result = run_cli([name, "--help"])

    assert_SUCCESS(result)
    assert "Usage:" in result.stdout


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr
