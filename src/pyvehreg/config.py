"""Registry configuration for pyvehreg."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyvehreg.exceptions import RegistryConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise RegistryConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class RegistryConfig:
    """Registry configuration.

    Parameters
    ----------
    genesis_height : int
        Starting height of the :class:`~pyvehreg.clock.BlockClock` a
        :class:`~pyvehreg.contract.RegistryContract` creates.
    default_sender : str or None
        Identity used by contract calls that do not carry a context.
        ``None`` means every public call must supply one.
    trace_enabled : bool
        Log the full (redacted) record at DEBUG after every mutation.
    thread_safe : bool
        Serialize all registry operations behind one lock. Disable only
        when the registry is confined to a single thread.
    """

    genesis_height: int = 0
    default_sender: str | None = None
    trace_enabled: bool = False
    thread_safe: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.genesis_height, bool) or not isinstance(self.genesis_height, int):
            raise RegistryConfigError(f"genesis_height must be an int, got {self.genesis_height!r}")
        if self.genesis_height < 0:
            raise RegistryConfigError(f"genesis_height must be non-negative, got {self.genesis_height}")
        if self.default_sender is not None and not self.default_sender:
            raise RegistryConfigError("default_sender must be non-empty when set")

    @classmethod
    def from_env(cls, **overrides: Any) -> RegistryConfig:
        """Create configuration from environment variables.

        Reads ``VEHREG_GENESIS_HEIGHT``, ``VEHREG_DEFAULT_SENDER``,
        ``VEHREG_TRACE_ENABLED`` and ``VEHREG_THREAD_SAFE``. Explicit
        keyword arguments override environment values.

        Raises
        ------
        RegistryConfigError
            If a numeric variable does not parse or a value is out of range.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        height_env = env.get("VEHREG_GENESIS_HEIGHT")
        if height_env is not None and "genesis_height" not in overrides:
            config_kwargs["genesis_height"] = _env_int("VEHREG_GENESIS_HEIGHT", height_env)

        sender_env = env.get("VEHREG_DEFAULT_SENDER")
        if sender_env and "default_sender" not in overrides:
            config_kwargs["default_sender"] = sender_env.strip()

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("VEHREG_TRACE_ENABLED"), False)

        if "thread_safe" not in overrides:
            config_kwargs["thread_safe"] = _env_bool(env.get("VEHREG_THREAD_SAFE"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
