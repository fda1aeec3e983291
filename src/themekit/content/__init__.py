# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/content/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content filter pipeline and builtin filters."""

from __future__ import annotations

from themekit.content.filters import autop, convert_chars, default_content_pipeline
from themekit.content.pipeline import DEFAULT_PRIORITY, ContentPipeline

__all__ = [
    "DEFAULT_PRIORITY",
    "ContentPipeline",
    "autop",
    "convert_chars",
    "default_content_pipeline",
]
