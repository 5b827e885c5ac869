"""Per-call ambient values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CallContext(BaseModel):
    """Who is calling, and at which logical height.

    Parameters
    ----------
    sender : str
        Caller identity (an account principal such as ``ST1PQ…``).
    block_height : int
        Logical clock value for the call. Only ``register`` records it.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    sender: str = Field(..., min_length=1)
    block_height: int = Field(default=0, ge=0)
