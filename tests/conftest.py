"""Test fixtures for ACR cleanup."""

import json
from typing import Any

import pytest

from acr_cleanup.config import CleanupConfig
from acr_cleanup.storage.azcli import AzureCLIClient

from support.fakes import SUPPORT_DIR, FakeRunner


@pytest.fixture
def support_manifests() -> list[dict[str, Any]]:
    """Manifests for a repository with two untagged images out of three."""
    return json.loads((SUPPORT_DIR / "manifests.json").read_text())


@pytest.fixture
def cleanup_cfg() -> CleanupConfig:
    """Config for a single repository."""
    return CleanupConfig(
        resource_group="rg-containers",
        registry_name="myregistry",
        repositories=["webapp"],
    )


@pytest.fixture
def runner() -> FakeRunner:
    """Fake ``az`` runner."""
    return FakeRunner()


@pytest.fixture
def az_client(
    cleanup_cfg: CleanupConfig, runner: FakeRunner
) -> AzureCLIClient:
    """Azure CLI client using the fake runner."""
    return AzureCLIClient(cleanup_cfg, runner=runner)
