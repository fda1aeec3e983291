# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit command-line interface (Click)."""
