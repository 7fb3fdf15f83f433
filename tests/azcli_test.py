"""Tests for the Azure CLI client."""

import json
from dataclasses import fields

import pytest

from acr_cleanup.config import CleanupConfig
from acr_cleanup.exceptions import CommandError
from acr_cleanup.models.manifest import Manifest
from acr_cleanup.storage.azcli import AzureCLIClient
from acr_cleanup.storage.command import CommandResult

from support.fakes import FakeRunner, usage


def test_show_usage(az_client: AzureCLIClient, runner: FakeRunner) -> None:
    runner.usages = [usage(1048576)]
    result = az_client.show_usage()
    assert result.current_value == 1048576
    assert runner.calls == [
        (
            "capture",
            [
                "az",
                "acr",
                "show-usage",
                "--resource-group",
                "rg-containers",
                "--name",
                "myregistry",
                "--output",
                "json",
            ],
        )
    ]


def test_show_usage_failure(
    az_client: AzureCLIClient, runner: FakeRunner
) -> None:
    runner.fail.add("show-usage")
    with pytest.raises(CommandError) as excinfo:
        az_client.show_usage()
    assert str(excinfo.value) == "The call to get the usage of the ACR failed."
    assert excinfo.value.result is not None
    assert excinfo.value.result.returncode == 1
    assert excinfo.value.result.stderr == "ERROR: boom"


def test_show_manifests(
    az_client: AzureCLIClient,
    runner: FakeRunner,
    support_manifests: list[dict],
) -> None:
    runner.manifests["webapp"] = support_manifests
    manifests = az_client.show_manifests("webapp")
    assert len(manifests) == 3
    assert [x.untagged for x in manifests] == [True, False, True]
    mode, args = runner.calls[0]
    assert mode == "capture"
    assert args[:4] == ["az", "acr", "repository", "show-manifests"]
    assert args[args.index("--repository") + 1] == "webapp"


def test_show_manifests_failure(
    az_client: AzureCLIClient, runner: FakeRunner
) -> None:
    runner.fail.add("show-manifests")
    with pytest.raises(CommandError, match="manifests"):
        az_client.show_manifests("webapp")


def test_malformed_output(
    az_client: AzureCLIClient, runner: FakeRunner
) -> None:
    runner.raw_output = "this is not JSON"
    with pytest.raises(json.JSONDecodeError):
        az_client.show_manifests("webapp")


def test_delete_image(az_client: AzureCLIClient, runner: FakeRunner) -> None:
    az_client.delete_image("webapp", Manifest(digest="sha256:abc"))
    assert runner.calls == [
        (
            "passthrough",
            [
                "az",
                "acr",
                "repository",
                "delete",
                "--resource-group",
                "rg-containers",
                "--name",
                "myregistry",
                "--image",
                "webapp@sha256:abc",
                "--yes",
            ],
        )
    ]


def test_delete_image_failure(
    az_client: AzureCLIClient, runner: FakeRunner
) -> None:
    runner.fail.add("delete")
    with pytest.raises(CommandError, match="remove the untagged image"):
        az_client.delete_image("webapp", Manifest(digest="sha256:abc"))


def test_no_resource_group(runner: FakeRunner) -> None:
    cfg = CleanupConfig(
        registry_name="myregistry", repositories=["webapp"], az_command="az2"
    )
    client = AzureCLIClient(cfg, runner=runner)
    client.delete_image("webapp", Manifest(digest="sha256:abc"))
    _, args = runner.calls[0]
    assert args[0] == "az2"
    assert "--resource-group" not in args


def test_dry_run_delete(
    cleanup_cfg: CleanupConfig, runner: FakeRunner
) -> None:
    cleanup_cfg.dry_run = True
    client = AzureCLIClient(cleanup_cfg, runner=runner)
    client.delete_image("webapp", Manifest(digest="sha256:abc"))
    assert runner.calls == []


def test_command_result_fields() -> None:
    """Results carry exit status and output, nothing else."""
    result = CommandResult(args=["az"], returncode=0)
    assert [x.name for x in fields(result)] == [
        "args",
        "returncode",
        "stdout",
        "stderr",
    ]
    assert result.ok
    assert not CommandResult(args=["az"], returncode=2).ok
