# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/terms/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Taxonomy term lookup helpers."""

from __future__ import annotations

from themekit.terms.model import (
    PrimaryTermProvider,
    Term,
    TermLookupError,
    TermResolution,
    TermSource,
    TermStore,
)
from themekit.terms.resolver import TermResolver, first_term, pick_term
from themekit.terms.store import InMemoryTermStore, TermDataError

__all__ = [
    "InMemoryTermStore",
    "PrimaryTermProvider",
    "Term",
    "TermDataError",
    "TermLookupError",
    "TermResolution",
    "TermResolver",
    "TermSource",
    "TermStore",
    "first_term",
    "pick_term",
]
