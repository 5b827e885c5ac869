"""End-to-end contract calls mirroring the registry's public surface."""

from __future__ import annotations

import pytest

from pyvehreg.config import RegistryConfig
from pyvehreg.contract import RegistryContract
from pyvehreg.exceptions import (
    RegistryConfigError,
    RegistryInputError,
    UnauthorizedError,
    UnknownFunctionError,
)
from pyvehreg.models.context import CallContext
from pyvehreg.models.result import Err, ErrorCode
from pyvehreg.registry import VehicleRegistry

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
OTHER = "ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


@pytest.fixture
def contract() -> RegistryContract:
    return RegistryContract(config=RegistryConfig(genesis_height=100, default_sender=OWNER))


def test_register_then_deactivate(contract: RegistryContract) -> None:
    result = contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4])
    assert result.is_ok

    details = contract.call_read_only("get-vehicle-details", ["vehicle-123"])
    assert details.owner == OWNER
    assert details.model == "Test Car"
    assert details.capacity == 4
    assert details.registration_height == 100
    assert details.active is True

    assert contract.call_public("update-vehicle-status", ["vehicle-123", False]).is_ok
    assert contract.call_read_only("is-vehicle-active", ["vehicle-123"]) is False


def test_explicit_context_overrides_default(contract: RegistryContract) -> None:
    contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4])

    result = contract.call_public(
        "update-vehicle-status",
        ["vehicle-123", False],
        CallContext(sender=OTHER, block_height=100),
    )

    assert isinstance(result, Err)
    assert result.code == ErrorCode.UNAUTHORIZED
    assert contract.call_read_only("is-vehicle-active", ["vehicle-123"]) is True
    with pytest.raises(UnauthorizedError):
        result.unwrap()


def test_registration_height_follows_clock(contract: RegistryContract) -> None:
    contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4])
    assert contract.mine(5) == 105
    contract.call_public("register-vehicle", ["vehicle-456", "Another Car", 6], contract.clock.context(OTHER))

    assert contract.registry.get_details("vehicle-123").registration_height == 100
    assert contract.registry.get_details("vehicle-456").registration_height == 105


def test_python_names_are_aliases(contract: RegistryContract) -> None:
    assert contract.call_public("register_vehicle", ["vehicle-123", "Test Car", 4]).is_ok
    assert contract.call_read_only("is_vehicle_active", ["vehicle-123"]) is True
    assert contract.call_read_only("get_vehicle_details", ["non-existent"]) is None


def test_unknown_function(contract: RegistryContract) -> None:
    with pytest.raises(UnknownFunctionError) as exc_info:
        contract.call_public("delete-vehicle", ["vehicle-123"])
    assert exc_info.value.function == "delete-vehicle"

    # Read-only names are not callable as public functions and vice versa.
    with pytest.raises(UnknownFunctionError):
        contract.call_public("is-vehicle-active", ["vehicle-123"])
    with pytest.raises(UnknownFunctionError):
        contract.call_read_only("register-vehicle", ["vehicle-123", "Test Car", 4])


def test_wrong_arity(contract: RegistryContract) -> None:
    with pytest.raises(RegistryInputError):
        contract.call_public("register-vehicle", ["vehicle-123", "Test Car"])
    with pytest.raises(RegistryInputError):
        contract.call_read_only("is-vehicle-active", [])
    assert len(contract.registry) == 0


def test_missing_sender_requires_context() -> None:
    contract = RegistryContract()

    with pytest.raises(RegistryConfigError):
        contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4])

    ctx = contract.clock.context(OWNER)
    assert contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4], ctx).is_ok
    assert contract.registry.get_details("vehicle-123").registration_height == 0


def test_uses_supplied_registry() -> None:
    registry = VehicleRegistry()
    contract = RegistryContract(registry, config=RegistryConfig(default_sender=OWNER))

    contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4])

    assert contract.registry is registry
    assert "vehicle-123" in registry


def test_owner_counting_scenario(contract: RegistryContract) -> None:
    contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4])
    contract.call_public("register-vehicle", ["vehicle-456", "Another Car", 6])
    contract.call_public("register-vehicle", ["vehicle-789", "Third Car", 2], contract.clock.context(OTHER))

    again = contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4], contract.clock.context(OTHER))

    assert again == Err(code=ErrorCode.ALREADY_REGISTERED, vehicle_id="vehicle-123")
    assert len(contract.registry) == 3
    assert contract.registry.vehicle_count(OWNER) == 2
    assert contract.registry.vehicle_count(OTHER) == 1


def test_read_only_rejects_non_string_id(contract: RegistryContract) -> None:
    with pytest.raises(RegistryInputError):
        contract.call_read_only("get-vehicle-details", [["vehicle-123"]])
    with pytest.raises(RegistryInputError):
        contract.call_read_only("is-vehicle-active", [123])
