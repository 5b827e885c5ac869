"""Data models for the vehicle registry."""

from pyvehreg.models.context import CallContext
from pyvehreg.models.result import Err, ErrorCode, Ok, Result
from pyvehreg.models.vehicle import OwnerRecord, VehicleRecord

__all__ = [
    "CallContext",
    "Err",
    "ErrorCode",
    "Ok",
    "OwnerRecord",
    "Result",
    "VehicleRecord",
]
