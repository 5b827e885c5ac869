"""Normalized registry events.

Every successful mutation is described by one of these events and handed
to the registry's ``on_event`` callback, if any.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegistryEventType(StrEnum):
    REGISTERED = "registered"
    STATUS_CHANGED = "status_changed"


class RegistryEvent(BaseModel):
    """A change applied to the registry."""

    model_config = ConfigDict(frozen=True)

    type: RegistryEventType
    vehicle_id: str = Field(..., min_length=1, description="Vehicle identifier")
    sender: str = Field(..., description="Identity that performed the call")
    block_height: int | None = Field(
        default=None,
        description="Logical height of the call, when the operation records one.",
    )
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    data: dict[str, Any] = Field(default_factory=dict, description="Fields written by the operation")

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
