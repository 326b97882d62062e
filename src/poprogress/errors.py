"""Error handling for poprogress.

This module defines the exception hierarchy raised by the pipeline and the
error boundary used by the command-line interface.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, TypeVar

import typer

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Process exit codes."""

    # General errors (1-9)
    GENERAL_ERROR = 1
    USAGE_ERROR = 2

    # File errors (10-19)
    FILE_NOT_FOUND = 10
    FILE_NOT_READABLE = 11
    DIRECTORY_NOT_FOUND = 12
    FILE_NOT_WRITABLE = 13

    # External command errors (40-49)
    EXTERNAL_COMMAND_FAILED = 40


# =============================================================================
# Exception Classes
# =============================================================================


class PoProgressError(Exception):
    """Base exception for poprogress errors.

    Attributes:
        message: Error message
        code: Error code, used as the process exit status
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class DirectoryNotFoundError(PoProgressError):
    """The locale base directory does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            message=f"No such directory: {path}",
            code=ErrorCode.DIRECTORY_NOT_FOUND,
            hint="Set LOCALEDIR or pass --locale-dir to point at the catalog tree.",
        )
        self.path = path


class CatalogNotFoundError(PoProgressError):
    """The catalog file of a requested locale does not exist."""

    def __init__(self, path: Path | str, locale: str | None = None) -> None:
        super().__init__(
            message=f"No such file {path}",
            code=ErrorCode.FILE_NOT_FOUND,
            hint=f"Check that locale '{locale}' exists." if locale else None,
        )
        self.path = path
        self.locale = locale


class CatalogReadError(PoProgressError):
    """A catalog file exists but cannot be read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(
            message=f"Cannot read {path}: {reason}",
            code=ErrorCode.FILE_NOT_READABLE,
        )
        self.path = path


class ExternalCommandError(PoProgressError):
    """An external command (such as git) failed.

    Raised inside author lookups only; callers degrade to an empty result.
    """

    def __init__(self, command: list[str], reason: str) -> None:
        super().__init__(
            message=f"Command {' '.join(command)!r} failed: {reason}",
            code=ErrorCode.EXTERNAL_COMMAND_FAILED,
        )
        self.command = command


class ReportWriteError(PoProgressError):
    """Writing a rendered report to a file failed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(
            message=f"Failed to write report to {path}: {reason}",
            code=ErrorCode.FILE_NOT_WRITABLE,
        )
        self.path = path


# =============================================================================
# Error Boundary
# =============================================================================


F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Convert exceptions raised by a CLI command into exit codes.

    Args:
        func: Function to wrap

    Returns:
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except PoProgressError as e:
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            if e.hint:
                typer.echo(typer.style(f"Hint: {e.hint}", fg="yellow"), err=True)
            raise typer.Exit(e.code.value)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore
