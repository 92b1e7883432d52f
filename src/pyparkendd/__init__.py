"""pyparkendd package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import Client
from .colors import FreeSpaceTier, color_for_percentage
from .exceptions import (
    IncompatibleAPIError,
    PyParkEnDDError,
    RequestError,
    ServerError,
    UpdateError,
    UpdateFailedError,
    ValidationError,
)
from .models import CityMetadata, LotState, Notification, ParkingLot
from .notifications import NotificationGate
from .state import JsonFileStateStore, MemoryStateStore, StateStore

try:
    __version__ = version("pyparkendd")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "CityMetadata",
    "Client",
    "FreeSpaceTier",
    "IncompatibleAPIError",
    "JsonFileStateStore",
    "LotState",
    "MemoryStateStore",
    "Notification",
    "NotificationGate",
    "ParkingLot",
    "PyParkEnDDError",
    "RequestError",
    "ServerError",
    "StateStore",
    "UpdateError",
    "UpdateFailedError",
    "ValidationError",
    "__version__",
    "color_for_percentage",
]
