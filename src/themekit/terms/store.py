# topmark:header:start
#
#   project      : ThemeKit
#   file         : store.py
#   file_relpath : src/themekit/terms/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory term store.

`InMemoryTermStore` implements both `TermStore` and `PrimaryTermProvider`
on plain dictionaries. It backs the ``themekit term`` command and the test
suite, and is a convenient adapter for hosts that can export their term
attachments as JSON.

JSON layout::

    {
      "terms": {
        "category": [
          {"identifier": 1, "display_name": "News", "slug": "news", "usage_count": 5}
        ]
      },
      "posts": {
        "42": {"category": {"terms": ["news"], "primary": "news"}}
      }
    }

Post identifiers are JSON object keys and therefore strings.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from themekit.config.logging import get_logger
from themekit.terms.model import Term

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable
    from pathlib import Path

    from themekit.config.logging import ThemekitLogger

logger: ThemekitLogger = get_logger(__name__)


class TermDataError(ValueError):
    """Raised when a term data document is malformed."""


class InMemoryTermStore:
    """Dictionary-backed term store with optional primary-term designations."""

    def __init__(self) -> None:
        self._attached: dict[tuple[Hashable, str], list[Term]] = {}
        self._primary: dict[tuple[Hashable, str], Term] = {}

    def attach(self, post_id: Hashable, taxonomy: str, *terms: Term) -> None:
        """Attach ``terms`` to ``post_id`` under ``taxonomy``, after any already attached."""
        self._attached.setdefault((post_id, taxonomy), []).extend(terms)

    def set_primary(self, post_id: Hashable, taxonomy: str, term: Term | None) -> None:
        """Designate (or with None, clear) the primary term of ``post_id``."""
        key = (post_id, taxonomy)
        if term is None:
            self._primary.pop(key, None)
        else:
            self._primary[key] = term

    def get_terms(self, post_id: Hashable, taxonomy: str) -> list[Term]:
        """Return a copy of the terms attached to ``post_id`` under ``taxonomy``."""
        return list(self._attached.get((post_id, taxonomy), []))

    def get_primary_term(self, taxonomy: str, post_id: Hashable) -> Term | None:
        """Return the designated primary term, if any."""
        return self._primary.get((post_id, taxonomy))

    # ------------------------------ Loading ------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InMemoryTermStore:
        """Build a store from a parsed term data document.

        Args:
            data (Mapping[str, Any]): Document with ``terms`` and ``posts`` tables.

        Returns:
            InMemoryTermStore: The populated store.

        Raises:
            TermDataError: If the document references unknown terms or has the
                wrong shape.
        """
        catalog: dict[tuple[str, str], Term] = {}
        for taxonomy, raw_terms in _as_mapping(data.get("terms", {}), "terms").items():
            if not isinstance(raw_terms, list):
                raise TermDataError(f"terms.{taxonomy} must be a list")
            for raw in cast("list[object]", raw_terms):
                term: Term = _term_from_dict(_as_mapping(raw, f"terms.{taxonomy}[]"), taxonomy)
                catalog[(taxonomy, term.slug)] = term

        store = cls()
        for post_id, per_tax in _as_mapping(data.get("posts", {}), "posts").items():
            for taxonomy, entry in _as_mapping(per_tax, f"posts.{post_id}").items():
                table: Mapping[str, Any] = _as_mapping(entry, f"posts.{post_id}.{taxonomy}")
                slugs: Iterable[object] = table.get("terms", [])
                store.attach(
                    post_id, taxonomy, *(_lookup(catalog, taxonomy, slug) for slug in slugs)
                )
                primary: object = table.get("primary")
                if primary is not None:
                    store.set_primary(post_id, taxonomy, _lookup(catalog, taxonomy, primary))
        logger.debug("Loaded %d term(s) for %d attachment(s)", len(catalog), len(store._attached))
        return store

    @classmethod
    def from_json_file(cls, path: Path) -> InMemoryTermStore:
        """Build a store from a JSON term data file.

        Raises:
            TermDataError: If the file is not valid JSON or is malformed.
        """
        try:
            data: object = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise TermDataError(f"{path}: invalid JSON: {exc}") from exc
        return cls.from_dict(_as_mapping(data, str(path)))


def _as_mapping(value: object, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TermDataError(f"{where} must be a table")
    return cast("Mapping[str, Any]", value)


def _term_from_dict(raw: Mapping[str, Any], taxonomy: str) -> Term:
    try:
        slug: str = str(raw["slug"])
        hint: object = raw.get("ordering_hint")
        return Term(
            identifier=raw.get("identifier", slug),
            display_name=str(raw.get("display_name", slug)),
            slug=slug,
            usage_count=int(raw.get("usage_count", 0)),
            ordering_hint=float(hint) if hint is not None else None,  # type: ignore[arg-type]
            taxonomy=taxonomy,
        )
    except KeyError as exc:
        raise TermDataError(f"term in {taxonomy!r} is missing {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise TermDataError(f"invalid term in {taxonomy!r}: {exc}") from exc


def _lookup(catalog: Mapping[tuple[str, str], Term], taxonomy: str, slug: object) -> Term:
    term: Term | None = catalog.get((taxonomy, str(slug)))
    if term is None:
        raise TermDataError(f"unknown term {slug!r} in taxonomy {taxonomy!r}")
    return term
