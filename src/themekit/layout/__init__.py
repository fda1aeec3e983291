# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSS class and style helpers for templates."""

from __future__ import annotations

from themekit.layout.classes import ImageUrlLookup, bg_image_style, conditional_class
from themekit.layout.columns import (
    COLUMN_DIVISORS,
    GRID_COLUMNS,
    column_class,
    first_classes,
)

__all__ = [
    "COLUMN_DIVISORS",
    "GRID_COLUMNS",
    "ImageUrlLookup",
    "bg_image_style",
    "column_class",
    "conditional_class",
    "first_classes",
]
