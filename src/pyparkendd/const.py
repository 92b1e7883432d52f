"""Constants for the ParkenDD API."""

DEFAULT_BASE_URL = "https://api.parkendd.de"
DEFAULT_NOTIFICATION_URL = "https://api.parkendd.de/notification.json"
DEFAULT_CITY = "Dresden"

SUPPORTED_API_VERSION = "1.0"

CITY_ENDPOINT = "/{city}"
TIMESPAN_ENDPOINT = "/{city}/{lot_id}/timespan"

FORECAST_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

SEEN_NOTIFICATIONS_KEY = "seenNotifications"
SKIP_NODATA_LOTS_KEY = "SkipNodataLots"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "pyparkendd",
}
