"""Synchronous invocation of external commands."""

import subprocess
from dataclasses import dataclass

import structlog

from ..exceptions import CommandError

__all__ = ["CommandResult", "CommandRunner"]


@dataclass
class CommandResult:
    """Exit status and, in capture mode, output of one command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Run commands one at a time, blocking until each exits.

    No timeout is applied; a hung command hangs the run until the operator
    interrupts it.
    """

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def capture(self, args: list[str]) -> CommandResult:
        """Run a command and collect its standard output and error."""
        self._logger.debug("Running command", args=args)
        try:
            proc = subprocess.run(
                args, capture_output=True, text=True, check=False
            )
        except OSError as exc:
            raise CommandError(f"Cannot run '{args[0]}': {exc}") from exc
        return CommandResult(
            args=list(args),
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )

    def passthrough(self, args: list[str]) -> CommandResult:
        """Run a command with its output going straight to our terminal."""
        self._logger.debug("Running command", args=args)
        try:
            proc = subprocess.run(args, check=False)
        except OSError as exc:
            raise CommandError(f"Cannot run '{args[0]}': {exc}") from exc
        return CommandResult(args=list(args), returncode=proc.returncode)
