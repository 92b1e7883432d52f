"""Mapping of raw API payloads to public models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import CityMetadata, LotState, Notification, ParkingLot
from .util import FieldStatus, decode_bool, decode_float, decode_int, decode_str

_KNOWN_STATES = {
    "many": LotState.MANY,
    "few": LotState.FEW,
    "full": LotState.FULL,
    "closed": LotState.CLOSED,
}


def map_lot_state(raw: Any) -> LotState:
    if not isinstance(raw, str):
        return LotState.NODATA
    return _KNOWN_STATES.get(raw, LotState.NODATA)


def read_api_version(data: Any) -> str | None:
    if not isinstance(data, Mapping):
        return None
    decoded = decode_str(data, "api_version")
    if decoded.ok and isinstance(decoded.raw, str):
        return decoded.value
    return None


def map_city_metadata(data: Any, api_version: str) -> CityMetadata:
    cities: dict[str, str] = {}
    raw_cities = data.get("cities") if isinstance(data, Mapping) else None
    if isinstance(raw_cities, Mapping):
        for city_id, name in raw_cities.items():
            if not isinstance(city_id, str):
                continue
            cities[city_id] = name if isinstance(name, str) else str(name)
    return CityMetadata(api_version=api_version, cities=cities)


def map_parking_lot(data: Mapping[str, Any]) -> ParkingLot:
    """Build a lot, resolving missing or malformed fields to their defaults."""
    # Closed lots report their free count as an empty string.
    free_field = decode_int(data, "free")
    free = free_field.value if free_field.status is FieldStatus.OK else 0
    state = map_lot_state(data.get("state"))
    if state is LotState.NODATA:
        free = -1
    lat = decode_float(data, "lat")
    lon = decode_float(data, "lon")
    return ParkingLot(
        name=decode_str(data, "name").or_default(""),
        count=decode_int(data, "count").or_default(0),
        free=free,
        state=state,
        lat=lat.value if lat.ok else None,
        lon=lon.value if lon.ok else None,
    )


def map_parking_lots(data: Any, *, skip_nodata: bool = False) -> list[ParkingLot]:
    if not isinstance(data, list):
        return []
    lots: list[ParkingLot] = []
    for section in data:
        if not isinstance(section, Mapping):
            continue
        raw_lots = section.get("lots")
        if not isinstance(raw_lots, list):
            continue
        for item in raw_lots:
            if not isinstance(item, Mapping):
                continue
            lot = map_parking_lot(item)
            if lot.state is LotState.NODATA and skip_nodata:
                continue
            lots.append(lot)
    return lots


def map_notification(data: Any) -> Notification:
    if not isinstance(data, Mapping):
        data = {}
    return Notification(
        id=decode_int(data, "id").or_default(0),
        title=decode_str(data, "notificationTitle").or_default(""),
        text=decode_str(data, "notificationText").or_default(""),
        display=decode_bool(data, "display").or_default(False),
    )
