# topmark:header:start
#
#   project      : ThemeKit
#   file         : fonts.py
#   file_relpath : src/themekit/fonts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Web-font stylesheet URL."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from themekit.constants import DEFAULT_FONT_SUBSET, DEFAULT_FONTS_BASE_URL

if TYPE_CHECKING:
    from collections.abc import Iterable

# Characters of the family/variant syntax that the font service expects unescaped.
_SAFE_CHARS: str = ":+,|"


def theme_fonts_url(
    families: Iterable[str],
    subset: str = DEFAULT_FONT_SUBSET,
    base_url: str = DEFAULT_FONTS_BASE_URL,
) -> str:
    """Return the stylesheet URL loading ``families``.

    Args:
        families (Iterable[str]): Families in ``Name+With+Plus:variants`` form, e.g.
            ``"Source+Sans+Pro:400,400i,700"``.
        subset (str): Comma-separated character subsets; empty to omit.
        base_url (str): Font service endpoint.

    Returns:
        str: ``<base_url>?family=A|B&subset=...``.

    Raises:
        ValueError: If ``families`` is empty.
    """
    family_list: list[str] = [f for f in families if f]
    if not family_list:
        raise ValueError("At least one font family is required")
    query: dict[str, str] = {"family": "|".join(family_list)}
    if subset:
        query["subset"] = subset
    separator: str = "&" if "?" in base_url else "?"
    return base_url + separator + urlencode(query, safe=_SAFE_CHARS)
