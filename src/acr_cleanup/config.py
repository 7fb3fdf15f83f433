"""Configuration for cleaning untagged images out of a container registry."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Self

import structlog
import yaml
from pydantic import BeforeValidator, Field, ValidationError
from safir.pydantic import CamelCaseModel

from .exceptions import ConfigurationError

RESOURCE_GROUP_ENV = "RES_GROUP"
REGISTRY_NAME_ENV = "ACR_NAME"
REPOSITORIES_ENV = "REPO_NAMES"


def _split_repositories(inp: Any) -> Any:
    # A comma-separated string; the empty string means no repositories.
    if inp is None:
        return []
    if isinstance(inp, str):
        stripped = inp.strip()
        return stripped.split(",") if stripped else []
    return inp


def _none_is_empty_str(inp: Any) -> Any:
    if inp is None:
        return ""
    return inp


class CleanupConfig(CamelCaseModel):
    """Which registry and repositories to clean, and how."""

    resource_group: Annotated[
        str,
        BeforeValidator(_none_is_empty_str),
        Field(
            title="Resource group",
            description="Azure resource group containing the registry.",
            examples=["rg-containers"],
        ),
    ] = ""

    registry_name: Annotated[
        str,
        BeforeValidator(_none_is_empty_str),
        Field(
            title="Registry name",
            description="Name of the Azure Container Registry.",
            examples=["myregistry"],
        ),
    ] = ""

    repositories: Annotated[
        list[str],
        BeforeValidator(_split_repositories),
        Field(
            title="Repositories",
            description=(
                "Repositories to check for untagged images, in order.  "
                "Either a list or a comma-separated string."
            ),
            examples=[["frontend", "backend"]],
        ),
    ] = []

    dry_run: Annotated[
        bool,
        Field(
            title="Dry run",
            description="List untagged images but do not delete them.",
        ),
    ] = False

    debug: Annotated[
        bool,
        Field(
            title="Debug",
            description="Much more verbose logging.",
        ),
    ] = False

    assume_yes: Annotated[
        bool,
        Field(
            title="Assume yes",
            description="Answer 'yes' to every confirmation prompt.",
        ),
    ] = False

    az_command: Annotated[
        str,
        Field(
            title="az command",
            description="Azure CLI executable to run.",
            examples=["az", "/usr/bin/az"],
        ),
    ] = "az"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build configuration from ``RES_GROUP``, ``ACR_NAME`` and
        ``REPO_NAMES``.
        """
        env = os.environ if environ is None else environ
        return cls(
            resource_group=env.get(RESOURCE_GROUP_ENV, ""),
            registry_name=env.get(REGISTRY_NAME_ENV, ""),
            repositories=env.get(REPOSITORIES_ENV, ""),
        )

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Build configuration from a YAML file.

        Raises
        ------
        ConfigurationError
            If the file cannot be read, is not YAML, or does not describe
            a valid configuration.  An empty file is an empty configuration.
        """
        try:
            return cls.model_validate(yaml.safe_load(path.read_text()) or {})
        except (OSError, yaml.YAMLError, ValidationError) as exc:
            problem = f"Cannot load configuration from {path}: {exc}"
            structlog.get_logger(__name__).error(problem)
            raise ConfigurationError([problem]) from exc

    def check(self) -> None:
        """Verify required settings are present.

        Every problem is logged before anything is raised.

        Raises
        ------
        ConfigurationError
            If the registry name or the repository list is empty.
        """
        logger = structlog.get_logger(__name__)
        problems: list[str] = []
        if not self.registry_name:
            problems.append("Azure Container Registry name is required.")
        if not self.repositories:
            problems.append("At least one repository has to be specified.")
        for problem in problems:
            logger.error(problem)
        if problems:
            raise ConfigurationError(problems)
