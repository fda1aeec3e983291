# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/icons/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline SVG icons."""

from __future__ import annotations

from themekit.icons.catalog import IconCatalog, is_valid_name
from themekit.icons.renderer import (
    IconRenderer,
    IconResult,
    IconRewriteError,
    build_open_tag,
    collapse_whitespace,
    render_icon,
    strip_aria_hidden,
)

__all__ = [
    "IconCatalog",
    "IconRenderer",
    "IconResult",
    "IconRewriteError",
    "build_open_tag",
    "collapse_whitespace",
    "is_valid_name",
    "render_icon",
    "strip_aria_hidden",
]
