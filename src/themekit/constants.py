# topmark:header:start
#
#   project      : ThemeKit
#   file         : constants.py
#   file_relpath : src/themekit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

THEMEKIT_VERSION: str = get_version("themekit")

# Config discovery
THEMEKIT_TOML_NAME: str = "themekit.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "themekit"

LOG_LEVEL_ENV_VAR: str = "THEMEKIT_LOG_LEVEL"

# Terms
DEFAULT_TAXONOMY: str = "category"

# Icons
DEFAULT_ICON_ROOT: str = "assets/icons"
DEFAULT_ICON_GROUP: str = "utility"
DEFAULT_ICON_SIZE: int = 16
DEFAULT_ICON_CLASS: str = "svg-icon"
ICON_SUFFIX: str = ".svg"

# Fonts
DEFAULT_FONTS_BASE_URL: str = "https://fonts.googleapis.com/css"
DEFAULT_FONT_FAMILIES: tuple[str, ...] = ("Source+Sans+Pro:400,400i,700,700i",)
DEFAULT_FONT_SUBSET: str = "latin,latin-ext"

# Theme
DEFAULT_CONTENT_WIDTH: int = 1024
