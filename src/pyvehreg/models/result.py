"""Discriminated result type returned by mutating registry operations."""

from __future__ import annotations

import enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from pyvehreg.exceptions import error_for_code


class ErrorCode(enum.IntEnum):
    """Registry error codes.

    Numeric values are stable and match the codes returned by the
    on-chain registry contract.
    """

    UNAUTHORIZED = 1
    ALREADY_REGISTERED = 2
    NOT_FOUND = 3


class Ok(BaseModel):
    """Successful outcome."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["ok"] = "ok"
    value: bool = True

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> bool:
        return self.value


class Err(BaseModel):
    """Failed outcome carrying exactly one :class:`ErrorCode`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["err"] = "err"
    code: ErrorCode
    vehicle_id: str = ""
    """Identifier the failing call referenced, for diagnostics only."""

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def value(self) -> int:
        """Numeric error code."""
        return int(self.code)

    def unwrap(self) -> bool:
        """Raise the exception mapped to :attr:`code`."""
        raise error_for_code(self.code, vehicle_id=self.vehicle_id)


Result = Annotated[Ok | Err, Field(discriminator="type")]
"""Either :class:`Ok` or :class:`Err`, discriminated on ``type``."""
