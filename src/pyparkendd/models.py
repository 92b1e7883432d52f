"""Public data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum


class LotState(StrEnum):
    MANY = "many"
    FEW = "few"
    FULL = "full"
    CLOSED = "closed"
    NODATA = "nodata"


@dataclass(frozen=True, slots=True)
class CityMetadata:
    api_version: str
    cities: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ParkingLot:
    name: str
    count: int
    free: int
    state: LotState
    lat: float | None = None
    lon: float | None = None
    distance: float | None = None
    is_favorite: bool = False

    @property
    def occupancy_ratio(self) -> float | None:
        """Share of occupied spaces, or None when it cannot be known."""
        if self.count <= 0 or self.free < 0:
            return None
        return 1 - self.free / self.count


@dataclass(frozen=True, slots=True)
class Notification:
    id: int
    title: str
    text: str
    display: bool
