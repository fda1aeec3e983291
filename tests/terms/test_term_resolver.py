# topmark:header:start
#
#   project      : ThemeKit
#   file         : test_term_resolver.py
#   file_relpath : tests/terms/test_term_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `themekit.terms.resolver`.

Covers the fallback ordering (single term, ordering hints, usage counts),
the primary-term designation and the handling of collaborator failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import make_term, parametrize
from themekit.terms import (
    InMemoryTermStore,
    Term,
    TermLookupError,
    TermResolver,
    TermSource,
    first_term,
    pick_term,
)

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from themekit.terms import TermResolution


class FailingStore:
    """Term store whose backend is unavailable."""

    def get_terms(self, post_id: Hashable, taxonomy: str) -> Sequence[Term]:
        raise TermLookupError("database gone")


class FailingPrimary:
    """Primary-term provider whose backend is unavailable."""

    def get_primary_term(self, taxonomy: str, post_id: Hashable) -> Term | None:
        raise TermLookupError("plugin error")


class StaticPrimary:
    """Primary-term provider returning a fixed value for every post."""

    def __init__(self, value: object) -> None:
        self.value = value

    def get_primary_term(self, taxonomy: str, post_id: Hashable) -> object:
        return self.value


def _store(*terms: Term, post_id: Hashable = 1, taxonomy: str = "category") -> InMemoryTermStore:
    store = InMemoryTermStore()
    store.attach(post_id, taxonomy, *terms)
    return store


def test_no_terms_resolves_to_none() -> None:
    """A post without terms has no primary term and no error."""
    resolver = TermResolver(InMemoryTermStore())

    assert resolver.resolve(post_id=1) is None
    resolution: TermResolution = resolver.lookup(post_id=1)
    assert resolution.term is None
    assert resolution.source is TermSource.NONE
    assert resolution.error is False
    assert not resolution.found


def test_single_term_wins_regardless_of_hint_and_count() -> None:
    """A single attached term is returned as-is."""
    only: Term = make_term("news", usage_count=0, ordering_hint=99)
    resolution = TermResolver(_store(only)).lookup(post_id=1)

    assert resolution.term == only
    assert resolution.source is TermSource.SINGLE


def test_lowest_ordering_hint_wins_when_all_terms_have_one() -> None:
    """Hints [2, 1, 3] select the term with hint 1."""
    terms = [
        make_term("b", ordering_hint=2),
        make_term("a", ordering_hint=1, usage_count=0),
        make_term("c", ordering_hint=3, usage_count=100),
    ]
    resolution = TermResolver(_store(*terms)).lookup(post_id=1)

    assert resolution.term is not None
    assert resolution.term.slug == "a"
    assert resolution.source is TermSource.ORDER_HINT


def test_usage_count_used_when_a_hint_is_missing() -> None:
    """One term without a hint disables hint ordering for the whole set."""
    terms = [
        make_term("a", ordering_hint=1, usage_count=1),
        make_term("b", usage_count=7),
        make_term("c", ordering_hint=0, usage_count=3),
    ]
    resolution = TermResolver(_store(*terms)).lookup(post_id=1)

    assert resolution.term is not None
    assert resolution.term.slug == "b"
    assert resolution.source is TermSource.USAGE_COUNT


def test_usage_count_tie_goes_to_first_encountered() -> None:
    """Counts [5, 9, 9] select the first count-9 term."""
    terms = [
        make_term("five", usage_count=5),
        make_term("nine-first", usage_count=9),
        make_term("nine-second", usage_count=9),
    ]
    term = TermResolver(_store(*terms)).resolve(post_id=1)

    assert isinstance(term, Term)
    assert term.slug == "nine-first"


def test_ordering_hint_tie_goes_to_first_encountered() -> None:
    """Equal hints keep store order."""
    terms = [make_term("x", ordering_hint=1.0), make_term("y", ordering_hint=1.0)]
    term, source = pick_term(terms)

    assert term is not None
    assert term.slug == "x"
    assert source is TermSource.ORDER_HINT


def test_zero_ordering_hint_counts_as_a_hint() -> None:
    """A hint of 0 is a real hint, not a missing one."""
    terms = [make_term("a", ordering_hint=1, usage_count=9), make_term("b", ordering_hint=0)]
    term, source = pick_term(terms)

    assert term is not None
    assert term.slug == "b"
    assert source is TermSource.ORDER_HINT


def test_primary_term_takes_precedence() -> None:
    """A designated primary term wins over the fallback ordering."""
    popular: Term = make_term("popular", usage_count=50)
    chosen: Term = make_term("chosen", usage_count=1)
    store: InMemoryTermStore = _store(popular, chosen)
    store.set_primary(1, "category", chosen)

    resolution = TermResolver(store, store).lookup(post_id=1)

    assert resolution.term == chosen
    assert resolution.source is TermSource.PRIMARY


def test_primary_provider_without_designation_falls_back() -> None:
    """No designation falls back to the store ordering."""
    store: InMemoryTermStore = _store(make_term("a", usage_count=1), make_term("b", usage_count=2))
    resolution = TermResolver(store, store).lookup(post_id=1)

    assert resolution.term is not None
    assert resolution.term.slug == "b"
    assert resolution.source is TermSource.USAGE_COUNT


def test_primary_provider_error_falls_back_to_store() -> None:
    """A failing provider is logged and ignored."""
    store: InMemoryTermStore = _store(make_term("only"))
    resolution = TermResolver(store, FailingPrimary()).lookup(post_id=1)

    assert resolution.term is not None
    assert resolution.term.slug == "only"
    assert resolution.error is False
    assert resolution.diagnostics.stats().n_warning == 1


def test_store_error_is_absence_with_error_flag(caplog: pytest.LogCaptureFixture) -> None:
    """A failing store yields no term; the resolution records the failure."""
    resolver = TermResolver(FailingStore())

    with caplog.at_level("WARNING"):
        resolution = resolver.lookup(post_id=1)

    assert resolution.term is None
    assert resolution.error is True
    assert resolution.diagnostics.stats().n_error == 1
    assert "database gone" in caplog.text
    assert resolver.resolve(post_id=1) is None


@parametrize(
    "value",
    [
        "not a term",
        make_term("tag-term", taxonomy="post_tag"),
    ],
)
def test_unusable_primary_term_is_ignored(value: object) -> None:
    """Non-terms and terms of another taxonomy are not accepted as primary."""
    store: InMemoryTermStore = _store(make_term("fallback"))
    resolution = TermResolver(store, StaticPrimary(value)).lookup(post_id=1)

    assert resolution.term is not None
    assert resolution.term.slug == "fallback"
    assert resolution.source is TermSource.SINGLE
    assert resolution.diagnostics.stats().n_warning == 1


def test_primary_term_without_taxonomy_is_accepted() -> None:
    """Terms that do not record their taxonomy are trusted."""
    designated: Term = make_term("designated")
    resolution = TermResolver(InMemoryTermStore(), StaticPrimary(designated)).lookup(post_id=1)

    assert resolution.term == designated
    assert resolution.source is TermSource.PRIMARY


@parametrize(
    ("field", "expected"),
    [
        ("slug", "news"),
        ("display_name", "Breaking News"),
        ("name", "Breaking News"),
        ("term_id", 7),
        ("count", 3),
    ],
)
def test_field_returns_scalar(field: str, expected: object) -> None:
    """Attribute names and host aliases return the field value."""
    term: Term = Term(identifier=7, display_name="Breaking News", slug="news", usage_count=3)
    assert TermResolver(_store(term)).resolve(field=field, post_id=1) == expected


@parametrize("field", ["order", "description"])
def test_field_without_value_returns_whole_term(field: str) -> None:
    """Unknown fields and fields set to None return the term itself."""
    term: Term = make_term("news")
    assert TermResolver(_store(term)).resolve(field=field, post_id=1) == term


def test_taxonomy_argument_and_default() -> None:
    """The taxonomy argument selects the attachment set; the default applies otherwise."""
    store = InMemoryTermStore()
    store.attach(1, "category", make_term("cat"))
    store.attach(1, "post_tag", make_term("tag"))

    assert TermResolver(store).resolve("post_tag", "slug", post_id=1) == "tag"
    assert TermResolver(store).resolve(field="slug", post_id=1) == "cat"
    assert TermResolver(store, default_taxonomy="post_tag").resolve(field="slug", post_id=1) == "tag"


def test_first_term_shortcut() -> None:
    """`first_term` resolves through a throwaway resolver."""
    store: InMemoryTermStore = _store(make_term("a", usage_count=1), make_term("b", usage_count=4))
    store.set_primary(1, "category", make_term("a"))

    assert first_term(store, field="slug", post_id=1) == "b"
    assert first_term(store, field="slug", post_id=1, primary=store) == "a"
    assert first_term(store, post_id=2) is None
