"""Model for registry storage usage."""

from typing import Annotated, Self

from pydantic import Field
from safir.pydantic import CamelCaseModel

__all__ = ["RegistryUsage", "to_gigabytes", "to_megabytes"]


def to_megabytes(num_bytes: int) -> float:
    return num_bytes / 1024 / 1024


def to_gigabytes(num_bytes: int) -> float:
    return to_megabytes(num_bytes) / 1024


class RegistryUsage(CamelCaseModel):
    """Point-in-time storage consumption of a registry and its limit.

    Both values are in bytes.  Conversion to megabytes and gigabytes is
    for display only.
    """

    current_value: Annotated[
        int,
        Field(
            title="Current value",
            description="Bytes of storage currently used.",
            examples=[2147483648],
        ),
    ]

    limit: Annotated[
        int,
        Field(
            title="Limit",
            description="Bytes of storage allowed by the registry SKU.",
            examples=[10737418240],
        ),
    ]

    name: Annotated[
        str | None,
        Field(title="Name", description="Name of the usage metric."),
    ] = None

    unit: Annotated[
        str | None,
        Field(title="Unit", description="Unit the registry reports in."),
    ] = None

    def describe(self) -> str:
        """Format usage as ``X GB (Y MB) out of Z GB``."""
        return (
            f"{to_gigabytes(self.current_value):.3f} GB "
            f"({to_megabytes(self.current_value):.3f} MB) "
            f"out of {to_gigabytes(self.limit):.0f} GB"
        )

    def reclaimed_since(self, before: Self) -> int:
        """Return bytes freed between an earlier snapshot and this one."""
        return before.current_value - self.current_value
