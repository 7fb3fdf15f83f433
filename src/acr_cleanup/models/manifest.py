"""Model for image manifests as reported by the Azure CLI."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field
from safir.pydantic import CamelCaseModel

__all__ = ["Manifest", "partition_untagged"]


def _non_list_is_none(inp: Any) -> Any:
    if not isinstance(inp, list):
        return None
    return inp


class Manifest(CamelCaseModel):
    """A stored image version, identified by its content digest."""

    digest: Annotated[
        str,
        Field(
            title="Digest",
            description="Content digest of the manifest.",
            examples=["sha256:0a1b2c3d4e5f"],
        ),
    ]

    tags: Annotated[
        list[str] | None,
        BeforeValidator(_non_list_is_none),
        Field(
            title="Tags",
            description=(
                "Tags pointing at this manifest.  Anything that is not a "
                "list is treated as no tags at all."
            ),
            examples=[["latest", "1.2.3"]],
        ),
    ] = None

    @property
    def untagged(self) -> bool:
        return not self.tags

    def image_reference(self, repository: str) -> str:
        """Return the ``repository@digest`` reference for this manifest."""
        return f"{repository}@{self.digest}"


def partition_untagged(
    manifests: list[Manifest],
) -> tuple[list[Manifest], list[Manifest]]:
    """Split manifests into (tagged, untagged), keeping their relative order.

    The input list is left alone.
    """
    tagged = [x for x in manifests if not x.untagged]
    untagged = [x for x in manifests if x.untagged]
    return tagged, untagged
