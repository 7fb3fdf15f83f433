"""Exceptions raised while cleaning up a container registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .storage.command import CommandResult

__all__ = [
    "CleanupError",
    "CommandError",
    "ConfigurationError",
]


class CleanupError(Exception):
    """Base class for errors that abort a cleanup run."""


class ConfigurationError(CleanupError):
    """Required configuration is missing.

    Parameters
    ----------
    problems
        Every problem found, in the order it was detected.
    """

    def __init__(self, problems: list[str]) -> None:
        super().__init__("The input parameters are invalid.")
        self.problems = problems


class CommandError(CleanupError):
    """An external command exited non-zero or could not be started.

    Parameters
    ----------
    message
        Human-readable summary of what failed.
    result
        Result of the failing invocation, if the process ran at all.
    """

    def __init__(
        self, message: str, result: CommandResult | None = None
    ) -> None:
        super().__init__(message)
        self.result = result
