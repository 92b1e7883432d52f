"""Shared utilities for field decoding and formatting."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from .const import FORECAST_DATE_FORMAT
from .exceptions import ValidationError

T = TypeVar("T")


class FieldStatus(Enum):
    OK = "ok"
    MISSING = "missing"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class Decoded(Generic[T]):
    """Outcome of reading one field from a JSON object."""

    status: FieldStatus
    value: T | None = None
    raw: Any = None

    @property
    def ok(self) -> bool:
        return self.status is FieldStatus.OK

    def or_default(self, default: T) -> T:
        if self.status is FieldStatus.OK and self.value is not None:
            return self.value
        return default


def _missing() -> Decoded[Any]:
    return Decoded(FieldStatus.MISSING)


def _malformed(raw: Any) -> Decoded[Any]:
    return Decoded(FieldStatus.MALFORMED, raw=raw)


def decode_str(data: Mapping[str, Any], key: str) -> Decoded[str]:
    if key not in data or data[key] is None:
        return _missing()
    raw = data[key]
    if isinstance(raw, str):
        return Decoded(FieldStatus.OK, raw, raw)
    if isinstance(raw, bool):
        return _malformed(raw)
    if isinstance(raw, int | float):
        return Decoded(FieldStatus.OK, str(raw), raw)
    return _malformed(raw)


def decode_int(data: Mapping[str, Any], key: str) -> Decoded[int]:
    if key not in data or data[key] is None:
        return _missing()
    raw = data[key]
    if isinstance(raw, bool):
        return _malformed(raw)
    if isinstance(raw, int):
        return Decoded(FieldStatus.OK, raw, raw)
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return _malformed(raw)
        return Decoded(FieldStatus.OK, int(raw), raw)
    if isinstance(raw, str):
        stripped = raw.strip()
        if not stripped:
            return _malformed(raw)
        try:
            return Decoded(FieldStatus.OK, int(stripped), raw)
        except ValueError:
            pass
        try:
            parsed = float(stripped)
        except ValueError:
            return _malformed(raw)
        if not math.isfinite(parsed):
            return _malformed(raw)
        return Decoded(FieldStatus.OK, int(parsed), raw)
    return _malformed(raw)


def decode_float(data: Mapping[str, Any], key: str) -> Decoded[float]:
    if key not in data or data[key] is None:
        return _missing()
    raw = data[key]
    if isinstance(raw, bool):
        return _malformed(raw)
    if isinstance(raw, int | float):
        return Decoded(FieldStatus.OK, float(raw), raw)
    if isinstance(raw, str):
        try:
            return Decoded(FieldStatus.OK, float(raw.strip()), raw)
        except ValueError:
            return _malformed(raw)
    return _malformed(raw)


def decode_bool(data: Mapping[str, Any], key: str) -> Decoded[bool]:
    if key not in data or data[key] is None:
        return _missing()
    raw = data[key]
    if isinstance(raw, bool):
        return Decoded(FieldStatus.OK, raw, raw)
    if isinstance(raw, int | float):
        return Decoded(FieldStatus.OK, raw != 0, raw)
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "1"):
            return Decoded(FieldStatus.OK, True, raw)
        if lowered in ("false", "no", "0"):
            return Decoded(FieldStatus.OK, False, raw)
    return _malformed(raw)


def format_forecast_timestamp(value: datetime) -> str:
    """Format a bound of the forecast range without touching its timezone."""
    if not isinstance(value, datetime):
        raise ValidationError("Forecast bounds must be datetime values.")
    return value.strftime(FORECAST_DATE_FORMAT)
