"""Contract-style entry point for the vehicle registry.

Calls are dispatched by function name (``"register-vehicle"``,
``"is-vehicle-active"`` ...) with positional arguments, the way a host
would forward contract calls. Caller identity and height travel in an
explicit :class:`~pyvehreg.models.context.CallContext`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pyvehreg._redact import short_principal
from pyvehreg.clock import BlockClock
from pyvehreg.config import RegistryConfig
from pyvehreg.exceptions import RegistryConfigError, RegistryInputError, UnknownFunctionError
from pyvehreg.models.context import CallContext
from pyvehreg.models.result import Result
from pyvehreg.models.vehicle import VehicleRecord
from pyvehreg.registry import VehicleRegistry

_logger = logging.getLogger(__name__)

_PUBLIC_ALIASES: dict[str, str] = {
    "register-vehicle": "register-vehicle",
    "register_vehicle": "register-vehicle",
    "update-vehicle-status": "update-vehicle-status",
    "update_vehicle_status": "update-vehicle-status",
}

_READ_ONLY_ALIASES: dict[str, str] = {
    "get-vehicle-details": "get-vehicle-details",
    "get_vehicle_details": "get-vehicle-details",
    "is-vehicle-active": "is-vehicle-active",
    "is_vehicle_active": "is-vehicle-active",
}


def _expect_arity(function: str, args: Sequence[Any], count: int) -> None:
    if len(args) != count:
        raise RegistryInputError(f"{function} takes {count} argument(s), got {len(args)}")


class RegistryContract:
    """Function-name dispatcher over a :class:`VehicleRegistry`.

    Usage::

        contract = RegistryContract(config=RegistryConfig(genesis_height=100))
        ctx = contract.clock.context("ST1PQ...")
        contract.call_public("register-vehicle", ["vehicle-123", "Test Car", 4], ctx)
        contract.call_read_only("is-vehicle-active", ["vehicle-123"])
    """

    def __init__(
        self,
        registry: VehicleRegistry | None = None,
        *,
        config: RegistryConfig | None = None,
    ) -> None:
        self._config = config if config is not None else RegistryConfig()
        if registry is None:
            registry = VehicleRegistry(
                thread_safe=self._config.thread_safe,
                trace_enabled=self._config.trace_enabled,
            )
        self._registry = registry
        self._clock = BlockClock(self._config.genesis_height)
        self._public: dict[str, Callable[[Sequence[Any], CallContext], Result]] = {
            "register-vehicle": self._register_vehicle,
            "update-vehicle-status": self._update_vehicle_status,
        }
        self._read_only: dict[str, Callable[[Sequence[Any]], Any]] = {
            "get-vehicle-details": self._get_vehicle_details,
            "is-vehicle-active": self._is_vehicle_active,
        }

    @property
    def registry(self) -> VehicleRegistry:
        return self._registry

    @property
    def clock(self) -> BlockClock:
        return self._clock

    def mine(self, blocks: int = 1) -> int:
        """Advance the contract clock and return the new height."""
        return self._clock.advance(blocks)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def call_public(
        self,
        function: str,
        args: Sequence[Any],
        context: CallContext | None = None,
    ) -> Result:
        """Invoke a state-changing function.

        Without *context* the configured ``default_sender`` calls at the
        current clock height.

        Raises
        ------
        UnknownFunctionError
            If *function* is not a public registry function.
        RegistryConfigError
            If no context is given and no default sender is configured.
        RegistryInputError
            If the arguments do not fit the function.
        """
        name = _PUBLIC_ALIASES.get(function)
        if name is None:
            raise UnknownFunctionError(function)
        ctx = context or self._default_context()
        _logger.debug(
            "call_public %s sender=%s height=%d",
            name,
            short_principal(ctx.sender),
            ctx.block_height,
        )
        return self._public[name](args, ctx)

    def call_read_only(self, function: str, args: Sequence[Any]) -> Any:
        """Invoke a read-only function. Never changes registry state."""
        name = _READ_ONLY_ALIASES.get(function)
        if name is None:
            raise UnknownFunctionError(function)
        return self._read_only[name](args)

    def _default_context(self) -> CallContext:
        sender = self._config.default_sender
        if sender is None:
            raise RegistryConfigError("no call context given and no default_sender configured")
        return self._clock.context(sender)

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def _register_vehicle(self, args: Sequence[Any], ctx: CallContext) -> Result:
        _expect_arity("register-vehicle", args, 3)
        vehicle_id, model, capacity = args
        return self._registry.register(
            vehicle_id,
            model,
            capacity,
            sender=ctx.sender,
            block_height=ctx.block_height,
        )

    def _update_vehicle_status(self, args: Sequence[Any], ctx: CallContext) -> Result:
        _expect_arity("update-vehicle-status", args, 2)
        vehicle_id, active = args
        return self._registry.update_status(vehicle_id, active, sender=ctx.sender)

    def _get_vehicle_details(self, args: Sequence[Any]) -> VehicleRecord | None:
        _expect_arity("get-vehicle-details", args, 1)
        return self._registry.get_details(args[0])

    def _is_vehicle_active(self, args: Sequence[Any]) -> bool:
        _expect_arity("is-vehicle-active", args, 1)
        return self._registry.is_active(args[0])
