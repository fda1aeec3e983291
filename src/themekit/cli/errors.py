# topmark:header:start
#
#   project      : ThemeKit
#   file         : errors.py
#   file_relpath : src/themekit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ThemeKit CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They print through the project console when one is present in the
Click context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from themekit.cli.exit_codes import ExitCode


class ThemekitError(click.ClickException):
    """Base class for all ThemeKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ThemekitUsageError(ThemekitError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ThemekitDataError(ThemekitError):
    """Error for malformed input data."""

    exit_code = ExitCode.DATA_ERROR


class ThemekitFileNotFoundError(ThemekitError):
    """Error when a requested icon or input file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ThemekitConfigError(ThemekitError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
