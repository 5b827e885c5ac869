"""Custom exception hierarchy for pyvehreg."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyvehreg.models.result import ErrorCode


class RegistryError(Exception):
    """Base exception for all pyvehreg errors."""


class RegistryConfigError(RegistryError):
    """Invalid or missing configuration."""


class RegistryInputError(RegistryError, ValueError):
    """An operation was called with arguments of the wrong type."""


class UnknownFunctionError(RegistryError):
    """A contract call named a function the registry does not expose."""

    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"unknown registry function: {function!r}")


class RegistryCallError(RegistryError):
    """A registry operation returned an error result.

    Only raised when a caller explicitly unwraps an ``Err`` result; the
    registry itself returns errors as values.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        vehicle_id: str = "",
    ) -> None:
        self.code = code
        self.vehicle_id = vehicle_id
        super().__init__(message)


class UnauthorizedError(RegistryCallError):
    """Caller is not the owner of the vehicle (code 1)."""


class AlreadyRegisteredError(RegistryCallError):
    """Vehicle identifier is already taken (code 2)."""


class VehicleNotFoundError(RegistryCallError):
    """Vehicle identifier is unknown (code 3)."""


def error_for_code(code: ErrorCode, *, vehicle_id: str = "") -> RegistryCallError:
    """Build the exception instance matching *code*."""
    # Local import: models.result imports this module for unwrap().
    from pyvehreg.models.result import ErrorCode

    mapping: dict[ErrorCode, type[RegistryCallError]] = {
        ErrorCode.UNAUTHORIZED: UnauthorizedError,
        ErrorCode.ALREADY_REGISTERED: AlreadyRegisteredError,
        ErrorCode.NOT_FOUND: VehicleNotFoundError,
    }
    exc_cls = mapping.get(code, RegistryCallError)
    suffix = f" (vehicle_id={vehicle_id})" if vehicle_id else ""
    return exc_cls(f"{code.name.lower()}{suffix}", code=code, vehicle_id=vehicle_id)
