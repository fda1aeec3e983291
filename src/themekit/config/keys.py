# topmark:header:start
#
#   project      : ThemeKit
#   file         : keys.py
#   file_relpath : src/themekit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ThemeKit configuration.

Keys defined here are the external configuration API, as they appear in
``themekit.toml`` and under ``[tool.themekit]`` in ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ThemeKit configuration."""

    # [icons]
    SECTION_ICONS: Final[str] = "icons"

    KEY_ICON_ROOT: Final[str] = "root"
    KEY_ICON_GROUP: Final[str] = "group"
    KEY_ICON_SIZE: Final[str] = "size"
    KEY_ICON_BASE_CLASS: Final[str] = "base_class"
    KEY_ICON_STRICT: Final[str] = "strict"

    # [terms]
    SECTION_TERMS: Final[str] = "terms"

    KEY_TAXONOMY: Final[str] = "taxonomy"

    # [fonts]
    SECTION_FONTS: Final[str] = "fonts"

    KEY_FONT_FAMILIES: Final[str] = "families"
    KEY_FONT_SUBSET: Final[str] = "subset"

    # [theme]
    SECTION_THEME: Final[str] = "theme"

    KEY_CONTENT_WIDTH: Final[str] = "content_width"
    KEY_FONT_SIZES: Final[str] = "font_sizes"
    KEY_COLORS: Final[str] = "colors"

    # [[theme.font_sizes]] / [[theme.colors]] entries
    KEY_NAME: Final[str] = "name"
    KEY_SHORT_NAME: Final[str] = "short_name"
    KEY_SIZE: Final[str] = "size"
    KEY_SLUG: Final[str] = "slug"
    KEY_COLOR: Final[str] = "color"
