# topmark:header:start
#
#   project      : ThemeKit
#   file         : model.py
#   file_relpath : src/themekit/terms/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Term value objects and the collaborator protocols of the term resolver.

Terms are owned by the host content store; ThemeKit only reads and compares
them. Two collaborators are consumed:

* `TermStore`: returns the terms attached to a post under a taxonomy.
* `PrimaryTermProvider`: optional; returns the term an editor designated as
  the "primary" one for a post.

Both may raise `TermLookupError`; the resolver treats that as absence.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from themekit.diagnostic import FrozenDiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

# Host field names accepted as aliases of `Term` attributes.
FIELD_ALIASES: Final[dict[str, str]] = {
    "term_id": "identifier",
    "id": "identifier",
    "name": "display_name",
    "count": "usage_count",
    "order": "ordering_hint",
}


class TermLookupError(Exception):
    """Raised by term collaborators when the backing store cannot answer."""


@dataclass(frozen=True, slots=True)
class Term:
    """A taxonomy term attached to a post.

    Attributes:
        identifier (int | str): Store identifier of the term.
        display_name (str): Human-readable name.
        slug (str): URL-safe name.
        usage_count (int): Number of posts using the term.
        ordering_hint (float | None): Explicit editorial order, if the store has one.
        taxonomy (str | None): Taxonomy the term belongs to, if known.
    """

    identifier: int | str
    display_name: str
    slug: str
    usage_count: int = 0
    ordering_hint: float | None = None
    taxonomy: str | None = None

    def get_field(self, name: str) -> object | None:
        """Return the value of attribute ``name`` (or one of its host aliases).

        Args:
            name (str): Attribute name, e.g. ``"slug"`` or ``"name"``.

        Returns:
            object | None: The attribute value, or None when the term has no such
                attribute.
        """
        attr: str = FIELD_ALIASES.get(name, name)
        if attr not in _TERM_FIELDS:
            return None
        return getattr(self, attr)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this term."""
        return {f: getattr(self, f) for f in _TERM_FIELDS}


_TERM_FIELDS: Final[tuple[str, ...]] = tuple(f.name for f in fields(Term))


class TermSource(Enum):
    """How a resolved term was chosen."""

    PRIMARY = "primary"
    SINGLE = "single"
    ORDER_HINT = "order_hint"
    USAGE_COUNT = "usage_count"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class TermResolution:
    """Outcome of a primary-term lookup.

    Attributes:
        term (Term | None): The resolved term, or None.
        source (TermSource): Which rule produced ``term``.
        error (bool): True when a collaborator failed and the result reflects that
            failure rather than a genuinely empty taxonomy.
        diagnostics (FrozenDiagnosticLog): Notes collected while resolving.
    """

    term: Term | None
    source: TermSource
    error: bool = False
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @property
    def found(self) -> bool:
        """Return True if a term was resolved."""
        return self.term is not None


@runtime_checkable
class TermStore(Protocol):
    """Read access to the terms attached to posts."""

    def get_terms(self, post_id: Hashable, taxonomy: str) -> Sequence[Term]:
        """Return the terms attached to ``post_id`` under ``taxonomy``, in store order."""
        ...


@runtime_checkable
class PrimaryTermProvider(Protocol):
    """Optional source of an editor-designated primary term."""

    def get_primary_term(self, taxonomy: str, post_id: Hashable) -> Term | None:
        """Return the primary term for ``post_id`` under ``taxonomy``, if designated."""
        ...
