"""Vehicle and owner records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VehicleRecord(BaseModel):
    """A registered vehicle.

    ``owner`` and ``registration_height`` never change after creation.
    ``active`` is the only field with a mutation path and is changed by
    replacing the record with an updated copy.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
    )

    owner: str
    """Identity of the account that registered the vehicle."""
    model: str
    """Free-form model name (e.g. ``"Test Car"``)."""
    capacity: int
    """Passenger capacity."""
    registration_height: int
    """Logical height (block height) at registration time."""
    active: bool = True
    """Whether the vehicle is currently in service."""


class OwnerRecord(BaseModel):
    """Per-owner metadata, created on the owner's first registration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    vehicle_count: int = Field(default=0, ge=0)
