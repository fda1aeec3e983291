# topmark:header:start
#
#   project      : ThemeKit
#   file         : resolver.py
#   file_relpath : src/themekit/terms/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Primary-term resolution for posts.

A post can carry several terms in one taxonomy while templates want to show
exactly one (a category badge, a breadcrumb). `TermResolver` picks it:

1. An editor-designated primary term, when a `PrimaryTermProvider` is
   configured and returns a usable term.
2. Otherwise the terms from the `TermStore`:
   - none: no term;
   - one: that term;
   - several, all with an ``ordering_hint``: the lowest hint;
   - several otherwise: the highest ``usage_count``.

Ties on hint or count go to the term the store returned first.

Collaborator failures (`TermLookupError`) never escape: a failing provider
falls through to the store, a failing store yields no term. The
`TermResolution` returned by `TermResolver.lookup` records whether the
empty result came from an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from themekit.config.logging import get_logger
from themekit.constants import DEFAULT_TAXONOMY
from themekit.diagnostic import DiagnosticLog
from themekit.terms.model import Term, TermLookupError, TermResolution, TermSource

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from themekit.config.logging import ThemekitLogger
    from themekit.terms.model import PrimaryTermProvider, TermStore

logger: ThemekitLogger = get_logger(__name__)


def pick_term(terms: Sequence[Term]) -> tuple[Term | None, TermSource]:
    """Pick the representative term among ``terms`` without consulting a provider.

    Args:
        terms (Sequence[Term]): Terms in store order.

    Returns:
        tuple[Term | None, TermSource]: The chosen term (None for an empty
            sequence) and the rule that chose it.
    """
    if not terms:
        return None, TermSource.NONE
    if len(terms) == 1:
        return terms[0], TermSource.SINGLE

    # min()/max() return the first of several equal candidates.
    if all(t.ordering_hint is not None for t in terms):
        return min(terms, key=_hint_key), TermSource.ORDER_HINT
    return max(terms, key=lambda t: t.usage_count), TermSource.USAGE_COUNT


def _hint_key(term: Term) -> float:
    hint: float | None = term.ordering_hint
    assert hint is not None  # guarded by pick_term
    return hint


class TermResolver:
    """Resolve the single representative term of a post.

    Args:
        store (TermStore): Source of the terms attached to posts.
        primary (PrimaryTermProvider | None): Optional primary-term designation.
        default_taxonomy (str): Taxonomy used when callers pass none.
    """

    def __init__(
        self,
        store: TermStore,
        primary: PrimaryTermProvider | None = None,
        *,
        default_taxonomy: str = DEFAULT_TAXONOMY,
    ) -> None:
        self.store = store
        self.primary = primary
        self.default_taxonomy = default_taxonomy

    def lookup(self, taxonomy: str | None = None, *, post_id: Hashable) -> TermResolution:
        """Resolve the term of ``post_id`` and report how it was chosen.

        Args:
            taxonomy (str | None): Taxonomy name; defaults to ``default_taxonomy``.
            post_id (Hashable): Identifier of the post. Required.

        Returns:
            TermResolution: The resolved term (if any) with its provenance.
        """
        tax: str = taxonomy or self.default_taxonomy
        log = DiagnosticLog()

        primary: Term | None = self._primary_term(tax, post_id, log)
        if primary is not None:
            logger.debug("Primary term for post %r in %r: %r", post_id, tax, primary.slug)
            return TermResolution(primary, TermSource.PRIMARY, diagnostics=log.freeze())

        try:
            terms: Sequence[Term] = self.store.get_terms(post_id, tax)
        except TermLookupError as exc:
            logger.warning("Term lookup failed for post %r in %r: %s", post_id, tax, exc)
            log.add_error(f"term store lookup failed: {exc}")
            return TermResolution(None, TermSource.NONE, error=True, diagnostics=log.freeze())

        term, source = pick_term(terms)
        if term is None:
            log.add_info(f"post {post_id!r} has no terms in taxonomy {tax!r}")
        logger.trace(
            "Resolved post %r in %r from %d term(s) by %s", post_id, tax, len(terms), source.value
        )
        return TermResolution(term, source, diagnostics=log.freeze())

    def resolve(
        self,
        taxonomy: str | None = None,
        field: str | None = None,
        *,
        post_id: Hashable,
    ) -> Term | object | None:
        """Return the representative term of ``post_id``, or one of its fields.

        Args:
            taxonomy (str | None): Taxonomy name; defaults to ``default_taxonomy``.
            field (str | None): Optional attribute to return instead of the term
                (``"slug"``, ``"display_name"``, or a host alias like ``"name"``).
            post_id (Hashable): Identifier of the post. Required.

        Returns:
            Term | object | None: The field value when ``field`` is set and the term
                has a non-empty value for it, the term otherwise, or None when the
                post has no term.
        """
        term: Term | None = self.lookup(taxonomy, post_id=post_id).term
        if term is None:
            return None
        if field:
            value: object | None = term.get_field(field)
            if value is not None:
                return value
        return term

    def _primary_term(self, taxonomy: str, post_id: Hashable, log: DiagnosticLog) -> Term | None:
        if self.primary is None:
            return None
        try:
            candidate: object = self.primary.get_primary_term(taxonomy, post_id)
        except TermLookupError as exc:
            logger.warning("Primary term lookup failed for post %r: %s", post_id, exc)
            log.add_warning(f"primary term lookup failed: {exc}")
            return None
        if candidate is None:
            return None
        if not isinstance(candidate, Term):
            log.add_warning(f"primary term provider returned {type(candidate).__name__}")
            return None
        if candidate.taxonomy is not None and candidate.taxonomy != taxonomy:
            log.add_warning(
                f"primary term {candidate.slug!r} belongs to {candidate.taxonomy!r}, "
                f"not {taxonomy!r}"
            )
            return None
        return candidate


def first_term(
    store: TermStore,
    taxonomy: str = DEFAULT_TAXONOMY,
    field: str | None = None,
    *,
    post_id: Hashable,
    primary: PrimaryTermProvider | None = None,
) -> Term | object | None:
    """Shortcut for ``TermResolver(store, primary).resolve(taxonomy, field, post_id=...)``."""
    return TermResolver(store, primary).resolve(taxonomy, field, post_id=post_id)
