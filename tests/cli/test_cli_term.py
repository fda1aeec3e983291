# topmark:header:start
#
#   project      : ThemeKit
#   file         : test_cli_term.py
#   file_relpath : tests/cli/test_cli_term.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `term` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize
from themekit.cli.exit_codes import ExitCode
from themekit.terms import InMemoryTermStore

if TYPE_CHECKING:
    from collections.abc import Hashable
    from pathlib import Path

    from themekit.terms import Term

TERM_DATA: dict[str, Any] = {
    "terms": {
        "category": [
            {"identifier": 1, "display_name": "News", "slug": "news", "usage_count": 5},
            {"identifier": 2, "display_name": "Sports", "slug": "sports", "usage_count": 9},
        ],
        "genre": [{"identifier": 7, "display_name": "Jazz", "slug": "jazz"}],
    },
    "posts": {
        "42": {
            "category": {"terms": ["news", "sports"], "primary": "news"},
            "genre": {"terms": ["jazz"]},
        },
        "43": {"category": {"terms": ["news", "sports"]}},
    },
}


@pytest.fixture
def data_file(isolation: Path) -> Path:
    """Write the term data document into the isolated project."""
    path: Path = isolation / "terms.json"
    path.write_text(json.dumps(TERM_DATA), encoding="utf-8")
    return path


@mark_cli
@parametrize(
    ("argv", "expected"),
    [
        (["--post-id", "42"], "News"),
        (["--post-id", "42", "--no-primary"], "Sports"),
        (["--post-id", "43"], "Sports"),
        (["--post-id", "42", "--field", "slug"], "news"),
        (["--post-id", "42", "--field", "term_id"], "1"),
        (["--post-id", "42", "--taxonomy", "genre"], "Jazz"),
    ],
)
def test_term_prints_resolved_value(
    isolation: Path, data_file: Path, argv: list[str], expected: str
) -> None:
    """The primary term, or the fallback choice, is printed."""
    result = run_cli_in(isolation, ["term", str(data_file), *argv])

    assert_SUCCESS(result)
    assert result.stdout.strip() == expected


@mark_cli
def test_term_taxonomy_from_config(isolation: Path, data_file: Path) -> None:
    """The default taxonomy comes from ``[terms]`` in the project config."""
    (isolation / "themekit.toml").write_text('[terms]\ntaxonomy = "genre"\n', encoding="utf-8")
    result = run_cli_in(isolation, ["term", str(data_file), "--post-id", "42"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == "Jazz"


@mark_cli
def test_term_unknown_field_falls_back_to_name(isolation: Path, data_file: Path) -> None:
    """A field the term lacks prints the name with a warning."""
    result = run_cli_in(isolation, ["term", str(data_file), "--post-id", "42", "-f", "colour"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == "News"
    assert "no field 'colour'" in result.stderr


@mark_cli
def test_term_without_terms_prints_nothing(isolation: Path, data_file: Path) -> None:
    """Posts without terms are not an error."""
    result = run_cli_in(isolation, ["term", str(data_file), "--post-id", "99"])

    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_term_json(isolation: Path, data_file: Path) -> None:
    """``--format json`` includes the term and how it was chosen."""
    result = run_cli_in(
        isolation, ["term", str(data_file), "--post-id", "43", "--format", "json"]
    )

    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert payload["source"] == "usage_count"
    assert payload["taxonomy"] == "category"
    assert payload["term"]["slug"] == "sports"
    assert payload["term"]["usage_count"] == 9


@mark_cli
def test_term_malformed_data_is_a_data_error(isolation: Path) -> None:
    """Documents referencing unknown terms exit with DATA_ERROR."""
    path: Path = isolation / "bad.json"
    path.write_text(json.dumps({"posts": {"1": {"category": {"terms": ["x"]}}}}), encoding="utf-8")
    result = run_cli_in(isolation, ["term", str(path), "--post-id", "1"])

    assert_exit(result, ExitCode.DATA_ERROR)
    assert "unknown term" in result.stderr


@mark_cli
@parametrize("field", [None, "slug", "colour"])
def test_term_queries_store_once(
    isolation: Path, data_file: Path, monkeypatch: pytest.MonkeyPatch, field: str | None
) -> None:
    """One invocation reads the post's terms and primary term a single time."""
    calls: list[str] = []
    get_terms = InMemoryTermStore.get_terms
    get_primary_term = InMemoryTermStore.get_primary_term

    def counting_get_terms(self: InMemoryTermStore, post_id: Hashable, taxonomy: str) -> list[Term]:
        calls.append("terms")
        return get_terms(self, post_id, taxonomy)

    def counting_get_primary(
        self: InMemoryTermStore, taxonomy: str, post_id: Hashable
    ) -> Term | None:
        calls.append("primary")
        return get_primary_term(self, taxonomy, post_id)

    monkeypatch.setattr(InMemoryTermStore, "get_terms", counting_get_terms)
    monkeypatch.setattr(InMemoryTermStore, "get_primary_term", counting_get_primary)
    argv: list[str] = ["term", str(data_file), "--post-id", "43"]
    if field:
        argv += ["--field", field]
    result = run_cli_in(isolation, argv)

    assert_SUCCESS(result)
    assert calls.count("terms") == 1
    assert calls.count("primary") == 1
