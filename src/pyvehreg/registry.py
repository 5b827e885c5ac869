"""In-memory vehicle registry.

This is the only component that mutates vehicle and owner records. Caller
identity and block height are explicit arguments of every operation; the
registry never reads them from shared state.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Callable
from typing import Any

from pyvehreg._redact import redact_for_log, short_principal
from pyvehreg.events import RegistryEvent, RegistryEventType
from pyvehreg.exceptions import RegistryInputError
from pyvehreg.models.result import Err, ErrorCode, Ok, Result
from pyvehreg.models.vehicle import OwnerRecord, VehicleRecord

_logger = logging.getLogger(__name__)


def _require(name: str, value: Any, expected: type) -> None:
    # bool is an int subclass; it is never a valid count or height.
    if expected is int and isinstance(value, bool):
        raise RegistryInputError(f"{name} must be int, got bool")
    if not isinstance(value, expected):
        raise RegistryInputError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


def _require_id(vehicle_id: Any) -> None:
    _require("vehicle_id", vehicle_id, str)
    if not vehicle_id:
        raise RegistryInputError("vehicle_id must be non-empty")


class VehicleRegistry:
    """Registry of vehicles and their owners.

    Usage::

        registry = VehicleRegistry()
        result = registry.register("vehicle-123", "Test Car", 4, sender=owner, block_height=100)
        if result.is_ok:
            registry.update_status("vehicle-123", False, sender=owner)

    Mutating operations return :data:`~pyvehreg.models.result.Result`
    values instead of raising. Failed calls leave both stores untouched.

    ``on_event`` runs while the registry lock is held, so listeners see
    events in mutation order. A listener may call back into the registry
    from its own thread but must not wait on another thread that does.
    """

    def __init__(
        self,
        *,
        thread_safe: bool = True,
        trace_enabled: bool = False,
        on_event: Callable[[RegistryEvent], None] | None = None,
    ) -> None:
        self._vehicles: dict[str, VehicleRecord] = {}
        self._owners: dict[str, OwnerRecord] = {}
        self._lock: contextlib.AbstractContextManager[Any] = (
            threading.RLock() if thread_safe else contextlib.nullcontext()
        )
        self._trace_enabled = trace_enabled
        self._on_event = on_event

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def register(
        self,
        vehicle_id: str,
        model: str,
        capacity: int,
        *,
        sender: str,
        block_height: int,
    ) -> Result:
        """Register a new vehicle owned by *sender*.

        Returns ``Err(ALREADY_REGISTERED)`` when *vehicle_id* is taken;
        otherwise stores an active record stamped with *block_height* and
        bumps the sender's vehicle count.

        Raises
        ------
        RegistryInputError
            If an argument has the wrong type or *vehicle_id* is empty.
        """
        _require_id(vehicle_id)
        _require("model", model, str)
        _require("capacity", capacity, int)
        _require("sender", sender, str)
        _require("block_height", block_height, int)

        with self._lock:
            if vehicle_id in self._vehicles:
                _logger.debug(
                    "Register rejected: vehicle_id=%s already registered (sender=%s)",
                    vehicle_id,
                    short_principal(sender),
                )
                return Err(code=ErrorCode.ALREADY_REGISTERED, vehicle_id=vehicle_id)

            record = VehicleRecord(
                owner=sender,
                model=model,
                capacity=capacity,
                registration_height=block_height,
                active=True,
            )
            previous = self._owners.get(sender)
            owner = OwnerRecord(vehicle_count=(previous.vehicle_count if previous is not None else 0) + 1)
            event = RegistryEvent(
                type=RegistryEventType.REGISTERED,
                vehicle_id=vehicle_id,
                sender=sender,
                block_height=block_height,
                data=record.model_dump(),
            )

            self._vehicles[vehicle_id] = record
            self._owners[sender] = owner

            _logger.debug(
                "Registered vehicle_id=%s owner=%s height=%d owner_count=%d",
                vehicle_id,
                short_principal(sender),
                block_height,
                owner.vehicle_count,
            )
            self._trace(vehicle_id, record)
            self._emit(event)
        return Ok()

    def update_status(self, vehicle_id: str, active: bool, *, sender: str) -> Result:
        """Set the ``active`` flag of a vehicle owned by *sender*.

        Returns ``Err(NOT_FOUND)`` for unknown ids and ``Err(UNAUTHORIZED)``
        when *sender* is not the owner. Writing the current value again is
        a successful no-op.

        Raises
        ------
        RegistryInputError
            If an argument has the wrong type or *vehicle_id* is empty.
        """
        _require_id(vehicle_id)
        _require("active", active, bool)
        _require("sender", sender, str)

        with self._lock:
            current = self._vehicles.get(vehicle_id)
            if current is None:
                _logger.debug("Status update rejected: vehicle_id=%s not found", vehicle_id)
                return Err(code=ErrorCode.NOT_FOUND, vehicle_id=vehicle_id)

            if current.owner != sender:
                _logger.debug(
                    "Status update rejected: vehicle_id=%s owner=%s sender=%s",
                    vehicle_id,
                    short_principal(current.owner),
                    short_principal(sender),
                )
                return Err(code=ErrorCode.UNAUTHORIZED, vehicle_id=vehicle_id)

            updated = current.model_copy(update={"active": active})
            event = RegistryEvent(
                type=RegistryEventType.STATUS_CHANGED,
                vehicle_id=vehicle_id,
                sender=sender,
                data={"active": active, "previous": current.active},
            )
            self._vehicles[vehicle_id] = updated

            _logger.debug("Vehicle vehicle_id=%s active=%s (was %s)", vehicle_id, active, current.active)
            self._trace(vehicle_id, updated)
            self._emit(event)
        return Ok()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_details(self, vehicle_id: str) -> VehicleRecord | None:
        """Return the current record for *vehicle_id*, or ``None``.

        Raises
        ------
        RegistryInputError
            If *vehicle_id* is not a string.
        """
        _require("vehicle_id", vehicle_id, str)
        with self._lock:
            return self._vehicles.get(vehicle_id)

    def is_active(self, vehicle_id: str) -> bool:
        """Return the ``active`` flag; unknown vehicles report ``False``.

        Use :meth:`get_details` to tell an unknown vehicle from an
        inactive one.
        """
        _require("vehicle_id", vehicle_id, str)
        with self._lock:
            record = self._vehicles.get(vehicle_id)
        return record.active if record is not None else False

    def get_owner(self, owner: str) -> OwnerRecord | None:
        _require("owner", owner, str)
        with self._lock:
            return self._owners.get(owner)

    def vehicle_count(self, owner: str) -> int:
        """Number of vehicles *owner* has registered (``0`` if none)."""
        record = self.get_owner(owner)
        return record.vehicle_count if record is not None else 0

    def vehicles_of(self, owner: str) -> list[str]:
        """Vehicle ids owned by *owner*, in registration order."""
        _require("owner", owner, str)
        with self._lock:
            return [vid for vid, record in self._vehicles.items() if record.owner == owner]

    def snapshot(self) -> dict[str, dict[str, dict[str, Any]]]:
        """JSON-ready copy of both stores."""
        with self._lock:
            return {
                "vehicles": {vid: record.model_dump() for vid, record in self._vehicles.items()},
                "owners": {owner: record.model_dump() for owner, record in self._owners.items()},
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        _require("vehicle_id", vehicle_id, str)
        with self._lock:
            return vehicle_id in self._vehicles

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _trace(self, vehicle_id: str, record: VehicleRecord) -> None:
        if self._trace_enabled:
            _logger.debug("Record vehicle_id=%s %s", vehicle_id, redact_for_log(record.model_dump()))

    def _emit(self, event: RegistryEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            _logger.debug("on_event callback failed for %s", event.type, exc_info=True)
