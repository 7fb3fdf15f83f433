"""Component factory."""

import logging

import structlog

from .config import CleanupConfig
from .services.cleaner import Cleaner, Confirm
from .services.prompt import ask_yes_no
from .storage.azcli import AzureCLIClient
from .storage.command import CommandRunner


def configure_logging(*, debug: bool) -> None:
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level)
    )


class Factory:
    """Build cleanup components.

    Parameters
    ----------
    config
        Cleanup configuration.
    runner
        Runs external commands.  Tests substitute a fake one.
    """

    def __init__(
        self, config: CleanupConfig, runner: CommandRunner | None = None
    ) -> None:
        self._config = config
        self._runner = runner if runner is not None else CommandRunner()

    def create_client(self) -> AzureCLIClient:
        return AzureCLIClient(self._config, runner=self._runner)

    def create_cleaner(self, confirm: Confirm = ask_yes_no) -> Cleaner:
        return Cleaner(self._config, self.create_client(), confirm=confirm)
