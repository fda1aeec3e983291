# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit package.

ThemeKit provides the presentation-layer helpers of a content-site theme:
primary-term resolution, float-grid column classes, inline SVG icons and a
few template utilities. The host content platform is modelled as injected
collaborators, so every helper can run (and be tested) on its own.
"""

from __future__ import annotations

from themekit.content import ContentPipeline, default_content_pipeline
from themekit.fonts import theme_fonts_url
from themekit.icons import IconCatalog, IconRenderer, IconResult, IconRewriteError, render_icon
from themekit.layout import bg_image_style, column_class, conditional_class
from themekit.terms import (
    InMemoryTermStore,
    Term,
    TermLookupError,
    TermResolution,
    TermResolver,
    TermSource,
    first_term,
)

__all__ = [
    "ContentPipeline",
    "IconCatalog",
    "IconRenderer",
    "IconResult",
    "IconRewriteError",
    "InMemoryTermStore",
    "Term",
    "TermLookupError",
    "TermResolution",
    "TermResolver",
    "TermSource",
    "bg_image_style",
    "column_class",
    "conditional_class",
    "default_content_pipeline",
    "first_term",
    "render_icon",
    "theme_fonts_url",
]
