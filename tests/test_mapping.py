from pyparkendd.mapping import (
    map_city_metadata,
    map_lot_state,
    map_notification,
    map_parking_lot,
    map_parking_lots,
    read_api_version,
)
from pyparkendd.models import LotState, ParkingLot

LOTS_SAMPLE = [
    {
        "name": "Innere Altstadt",
        "lots": [
            {"name": "Altmarkt", "count": 400, "free": 126, "state": "many", "lat": 51.05, "lon": 13.73},
            {"name": "An der Frauenkirche", "count": 120, "free": "", "state": "full"},
            {"name": "Kongresszentrum", "count": 250, "free": 40, "state": "unknown"},
        ],
    },
    {
        "name": "Ring West",
        "lots": [
            {"name": "Ammonstrasse", "count": 180, "free": "12", "state": "few"},
            {"name": "Kaufhaus", "count": 90, "free": "", "state": "closed"},
        ],
    },
]


def test_map_lot_state() -> None:
    assert map_lot_state("many") is LotState.MANY
    assert map_lot_state("few") is LotState.FEW
    assert map_lot_state("full") is LotState.FULL
    assert map_lot_state("closed") is LotState.CLOSED
    assert map_lot_state("Many") is LotState.NODATA
    assert map_lot_state("nodata") is LotState.NODATA
    assert map_lot_state(None) is LotState.NODATA
    assert map_lot_state(3) is LotState.NODATA


def test_full_lot_with_empty_free() -> None:
    lot = map_parking_lot({"name": "Frauenkirche", "count": 120, "free": "", "state": "full"})
    assert lot.state is LotState.FULL
    assert lot.free == 0


def test_unknown_state_forces_unknown_free() -> None:
    lot = map_parking_lot({"name": "Kongresszentrum", "count": 250, "free": 40, "state": "error"})
    assert lot == ParkingLot(name="Kongresszentrum", count=250, free=-1, state=LotState.NODATA)


def test_missing_fields_use_defaults() -> None:
    lot = map_parking_lot({"state": "few"})
    assert lot.name == ""
    assert lot.count == 0
    assert lot.free == 0
    assert lot.lat is None
    assert lot.lon is None
    assert lot.distance is None
    assert lot.is_favorite is False


def test_malformed_free_is_zero() -> None:
    lot = map_parking_lot({"name": "X", "count": 10, "free": "n/a", "state": "many"})
    assert lot.free == 0


def test_map_parking_lots_preserves_order() -> None:
    lots = map_parking_lots(LOTS_SAMPLE)
    assert [lot.name for lot in lots] == [
        "Altmarkt",
        "An der Frauenkirche",
        "Kongresszentrum",
        "Ammonstrasse",
        "Kaufhaus",
    ]
    assert lots[0].lat == 51.05
    assert lots[3].free == 12
    assert lots[4].free == 0
    assert map_parking_lots(LOTS_SAMPLE) == lots


def test_map_parking_lots_skips_nodata() -> None:
    lots = map_parking_lots(LOTS_SAMPLE, skip_nodata=True)
    assert "Kongresszentrum" not in [lot.name for lot in lots]
    assert len(lots) == 4


def test_map_parking_lots_ignores_invalid_shapes() -> None:
    assert map_parking_lots({"lots": []}) == []
    assert map_parking_lots([{"lots": "none"}, "section", {"lots": [1, None]}]) == []


def test_map_city_metadata() -> None:
    data = {"api_version": "1.0", "cities": {"Dresden": "Dresden", "Ingolstadt": "Ingolstadt"}}
    assert read_api_version(data) == "1.0"
    metadata = map_city_metadata(data, "1.0")
    assert metadata.api_version == "1.0"
    assert dict(metadata.cities) == {"Dresden": "Dresden", "Ingolstadt": "Ingolstadt"}


def test_read_api_version_requires_string() -> None:
    assert read_api_version({"api_version": 1.0}) is None
    assert read_api_version({}) is None
    assert read_api_version([]) is None


def test_map_notification() -> None:
    notification = map_notification(
        {"display": True, "id": 42, "notificationTitle": "Hinweis", "notificationText": "Neue Daten"}
    )
    assert notification.id == 42
    assert notification.display is True
    assert notification.title == "Hinweis"
    assert notification.text == "Neue Daten"


def test_map_notification_defaults() -> None:
    notification = map_notification({})
    assert notification.id == 0
    assert notification.display is False
    assert notification.title == ""
    assert notification.text == ""
