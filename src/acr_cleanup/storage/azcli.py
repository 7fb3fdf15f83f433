"""Registry operations performed by shelling out to the Azure CLI."""

import json

import structlog

from ..config import CleanupConfig
from ..exceptions import CommandError
from ..models.manifest import Manifest
from ..models.usage import RegistryUsage
from .command import CommandResult, CommandRunner

__all__ = ["AzureCLIClient"]


class AzureCLIClient:
    """Collection of the ``az acr`` calls we need.

    Everything here is synchronous, and one process runs at a time.
    Authentication is whatever ``az login`` has already established; we
    never touch it.
    """

    def __init__(
        self, cfg: CleanupConfig, runner: CommandRunner | None = None
    ) -> None:
        self._az = cfg.az_command
        self._resource_group = cfg.resource_group
        self._registry_name = cfg.registry_name
        self._dry_run = cfg.dry_run
        self._runner = runner if runner is not None else CommandRunner()
        self._logger = structlog.get_logger(__name__)

    def _registry_args(self) -> list[str]:
        args: list[str] = []
        if self._resource_group:
            args.extend(["--resource-group", self._resource_group])
        args.extend(["--name", self._registry_name])
        return args

    def _check(self, result: CommandResult, message: str) -> None:
        if result.ok:
            return
        self._logger.debug(
            "Command failed",
            args=result.args,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
        raise CommandError(message, result)

    def show_usage(self) -> RegistryUsage:
        """Return current storage usage for the registry."""
        args = [
            self._az,
            "acr",
            "show-usage",
            *self._registry_args(),
            "--output",
            "json",
        ]
        result = self._runner.capture(args)
        self._check(result, "The call to get the usage of the ACR failed.")
        usage = json.loads(result.stdout)["value"][0]
        return RegistryUsage.model_validate(usage)

    def show_manifests(self, repository: str) -> list[Manifest]:
        """Return every manifest in a repository, in the order reported."""
        args = [
            self._az,
            "acr",
            "repository",
            "show-manifests",
            *self._registry_args(),
            "--repository",
            repository,
            "--output",
            "json",
        ]
        result = self._runner.capture(args)
        self._check(
            result, "The call to get the manifests from the ACR failed."
        )
        manifests = [
            Manifest.model_validate(x) for x in json.loads(result.stdout)
        ]
        self._logger.debug(
            f"Found {len(manifests)} manifests", repository=repository
        )
        return manifests

    def delete_image(self, repository: str, manifest: Manifest) -> None:
        """Delete one manifest, letting ``az`` talk to the terminal."""
        image = manifest.image_reference(repository)
        if self._dry_run:
            self._logger.info(f"Image {image} deleted (not really)")
            return
        args = [
            self._az,
            "acr",
            "repository",
            "delete",
            *self._registry_args(),
            "--image",
            image,
            "--yes",
        ]
        result = self._runner.passthrough(args)
        self._check(
            result,
            "The call to remove the untagged image from the ACR failed.",
        )
        self._logger.debug(f"Image {image} deleted")
