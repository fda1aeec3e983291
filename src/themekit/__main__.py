# topmark:header:start
#
#   project      : ThemeKit
#   file         : __main__.py
#   file_relpath : src/themekit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point: ``python -m themekit`` runs the ``themekit`` CLI."""

from __future__ import annotations

from themekit.cli.main import cli

if __name__ == "__main__":
    cli()
