"""Removes untagged images from the repositories of one registry."""

from collections.abc import Callable

import structlog

from ..config import CleanupConfig
from ..models.manifest import partition_untagged
from ..models.usage import RegistryUsage, to_megabytes
from ..storage.azcli import AzureCLIClient
from .prompt import ask_yes_no

type Confirm = Callable[[str, bool], bool]


class Cleaner:
    """Find untagged manifests, confirm with the operator, delete them,
    and report on what that did to storage usage.
    """

    def __init__(
        self,
        cfg: CleanupConfig,
        client: AzureCLIClient,
        *,
        confirm: Confirm = ask_yes_no,
    ) -> None:
        self._repositories = list(cfg.repositories)
        self._dry_run = cfg.dry_run
        self._assume_yes = cfg.assume_yes
        self._client = client
        self._confirm = confirm
        self._logger = structlog.get_logger(__name__)

    def report_usage(self) -> RegistryUsage:
        """Fetch and print current registry usage."""
        usage = self._client.show_usage()
        print(f"Current ACR usage: {usage.describe()}.")
        return usage

    def clean_repository(self, repository: str) -> int:
        """Delete untagged images from one repository.

        Returns
        -------
        int
            Number of images deleted.
        """
        self._logger.info(
            f"Now checking repository '{repository}' for untagged images..."
        )
        manifests = self._client.show_manifests(repository)
        _, untagged = partition_untagged(manifests)
        if not untagged:
            self._logger.warning(
                "Found no untagged images in this repository."
            )
            return 0

        found = (
            f"Found {len(untagged)} untagged images out of {len(manifests)}"
            " images in total."
        )
        if self._dry_run:
            self._logger.info(f"{found} Dry run: nothing will be deleted.")
        elif self._assume_yes:
            self._logger.info(found)
        elif not self._confirm(f"{found} Do you want to continue?", True):
            return 0

        for manifest in untagged:
            print(manifest.image_reference(repository))
            self._client.delete_image(repository, manifest)
        if self._dry_run:
            return 0
        return len(untagged)

    def clean(self) -> int:
        """Clean every configured repository, in order.

        Returns
        -------
        int
            Total number of images deleted.
        """
        removed = 0
        for repository in self._repositories:
            removed += self.clean_repository(repository)
        return removed

    def summarize(self, before: RegistryUsage, removed: int) -> None:
        """Report usage after cleanup, if anything was removed."""
        if not removed:
            self._logger.warning("Nothing to do, exiting now...")
            return
        after = self._client.show_usage()
        print(f"ACR usage after cleanup: {after.describe()}.")
        reclaimed = to_megabytes(after.reclaimed_since(before))
        print(
            f"You reclaimed {reclaimed:.3f} MB of your allowed storage space."
        )

    def run(self) -> int:
        """Report usage, clean all repositories, and summarize."""
        self._logger.warning(
            "The script requires you to be already logged in with the"
            " subscription you want to manage!"
        )
        before = self.report_usage()
        removed = self.clean()
        self.summarize(before, removed)
        return removed
