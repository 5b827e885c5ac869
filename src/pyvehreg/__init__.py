"""pyvehreg - In-memory vehicle registry with owner-gated status updates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvehreg")
except PackageNotFoundError:
    __version__ = "0+local"
from pyvehreg.clock import BlockClock
from pyvehreg.config import RegistryConfig
from pyvehreg.contract import RegistryContract
from pyvehreg.events import RegistryEvent, RegistryEventType
from pyvehreg.exceptions import (
    AlreadyRegisteredError,
    RegistryCallError,
    RegistryConfigError,
    RegistryError,
    RegistryInputError,
    UnauthorizedError,
    UnknownFunctionError,
    VehicleNotFoundError,
)
from pyvehreg.models import (
    CallContext,
    Err,
    ErrorCode,
    Ok,
    OwnerRecord,
    Result,
    VehicleRecord,
)
from pyvehreg.registry import VehicleRegistry

__all__ = [
    "__version__",
    "AlreadyRegisteredError",
    "BlockClock",
    "CallContext",
    "Err",
    "ErrorCode",
    "Ok",
    "OwnerRecord",
    "RegistryCallError",
    "RegistryConfig",
    "RegistryConfigError",
    "RegistryContract",
    "RegistryError",
    "RegistryEvent",
    "RegistryEventType",
    "RegistryInputError",
    "Result",
    "UnauthorizedError",
    "UnknownFunctionError",
    "VehicleNotFoundError",
    "VehicleRecord",
    "VehicleRegistry",
]
