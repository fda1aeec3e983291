# topmark:header:start
#
#   project      : ThemeKit
#   file         : __init__.py
#   file_relpath : src/themekit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for ThemeKit.

Import from the submodules directly (`themekit.config.model`,
`themekit.config.logging`); this package keeps no re-exports so that the
logging module stays importable from everywhere without cycles.
"""
