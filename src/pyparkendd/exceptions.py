"""Library exceptions."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class UpdateError(StrEnum):
    """Failure kinds reported by the metadata and lot list requests."""

    REQUEST = "request"
    SERVER = "server"
    INCOMPATIBLE_API = "incompatible_api"


class PyParkEnDDError(Exception):
    """Base exception for the library."""


class ValidationError(PyParkEnDDError):
    """Raised when inputs fail validation."""


class UpdateFailedError(PyParkEnDDError):
    """Base class for classified update failures."""

    error_type: UpdateError


class RequestError(UpdateFailedError):
    """Raised when the request failed without a 200 response."""

    error_type = UpdateError.REQUEST


class ServerError(UpdateFailedError):
    """Raised when a 200 response could not be read."""

    error_type = UpdateError.SERVER


class IncompatibleAPIError(UpdateFailedError):
    """Raised when the server reports an unsupported API version."""

    error_type = UpdateError.INCOMPATIBLE_API

    def __init__(self, message: str, *, api_version: str | None) -> None:
        super().__init__(message)
        self.api_version = api_version
        self.cities: Mapping[str, str] = {}
