# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ThemeKit CLI subcommands."""
