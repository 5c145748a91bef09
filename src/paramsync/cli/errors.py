# topmark:header:start
#
#   project      : ParamSync
#   file         : errors.py
#   file_relpath : src/paramsync/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Exceptions for ParamSync CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `from_core_error` maps resolution errors from
    `paramsync.core.errors` onto the matching CLI error.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from paramsync.cli.exit_codes import ExitCode
from paramsync.core.errors import (
    ConfigError,
    FetchError,
    KeyCollisionError,
    ParamsyncError,
    UnsupportedParamTypeError,
)


class ParamsyncCliError(click.ClickException):
    """Base class for all ParamSync CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ParamsyncUsageError(ParamsyncCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ParamsyncDataError(ParamsyncCliError):
    """Error for inconsistent resolved data or malformed manifests."""

    exit_code = ExitCode.DATA_ERROR


class ParamsyncFileNotFoundError(ParamsyncCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ParamsyncUnavailableError(ParamsyncCliError):
    """Error when the parameter store cannot serve a lookup."""

    exit_code = ExitCode.UNAVAILABLE


class ParamsyncConfigError(ParamsyncCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_core_error(exc: ParamsyncError) -> ParamsyncCliError:
    """Return the CLI error matching a resolution error."""
    if isinstance(exc, (KeyCollisionError, UnsupportedParamTypeError)):
        return ParamsyncDataError(str(exc))
    if isinstance(exc, FetchError):
        return ParamsyncUnavailableError(str(exc))
    if isinstance(exc, ConfigError):
        return ParamsyncConfigError(str(exc))
    return ParamsyncCliError(str(exc))
