"""Client for the ParkenDD parking availability API."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime
from typing import Any
from urllib.parse import quote

import aiohttp

from .const import (
    CITY_ENDPOINT,
    DEFAULT_BASE_URL,
    DEFAULT_CITY,
    DEFAULT_HEADERS,
    DEFAULT_NOTIFICATION_URL,
    SUPPORTED_API_VERSION,
    TIMESPAN_ENDPOINT,
)
from .exceptions import (
    IncompatibleAPIError,
    RequestError,
    ServerError,
    UpdateFailedError,
    ValidationError,
)
from .mapping import map_city_metadata, map_notification, map_parking_lots, read_api_version
from .models import CityMetadata, Notification, ParkingLot
from .notifications import NotificationGate
from .state import MemoryStateStore, StateStore, skip_nodata_lots
from .util import format_forecast_timestamp

_LOGGER = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=None)


class Client:
    """Fetch and normalize ParkenDD data.

    Every request is attempted once. Metadata and lot list failures raise a
    subclass of ``UpdateFailedError``; forecast and notification failures are
    reported as ``None``.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        notification_url: str = DEFAULT_NOTIFICATION_URL,
        city: str = DEFAULT_CITY,
        supported_api_version: str = SUPPORTED_API_VERSION,
        timeout: aiohttp.ClientTimeout | None = None,
        store: StateStore | None = None,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._base_url = self._normalize_base_url(base_url)
        self._notification_url = self._require_absolute_url(notification_url, "notification_url")
        if not isinstance(city, str) or not city.strip():
            raise ValidationError("city must be a non-empty string.")
        self._city = city.strip()
        self._supported_api_version = supported_api_version
        self._timeout = timeout or _DEFAULT_TIMEOUT
        self._store = store if store is not None else MemoryStateStore()
        self._gate = NotificationGate(self._store)

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    @property
    def city(self) -> str:
        return self._city

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def notification_gate(self) -> NotificationGate:
        return self._gate

    async def get_metadata(self) -> CityMetadata:
        """Return the API version and supported cities."""
        _LOGGER.debug("get_metadata started")
        data = await self._get_json(self._base_url)
        api_version = read_api_version(data)
        if api_version != self._supported_api_version:
            _LOGGER.error(
                "Found API version %s, only %s is supported",
                api_version,
                self._supported_api_version,
            )
            raise IncompatibleAPIError(
                f"Unsupported API version {api_version}.",
                api_version=api_version,
            )
        metadata = map_city_metadata(data, api_version)
        _LOGGER.debug("get_metadata completed with %d cities", len(metadata.cities))
        return metadata

    async def list_parking_lots(self) -> list[ParkingLot]:
        """Return all lots of the configured city in payload order."""
        _LOGGER.debug("list_parking_lots started for %s", self._city)
        data = await self._get_json(self._build_url(CITY_ENDPOINT.format(city=self._city)))
        skip_nodata = await asyncio.to_thread(skip_nodata_lots, self._store)
        lots = map_parking_lots(data, skip_nodata=skip_nodata)
        _LOGGER.debug("list_parking_lots completed with %d lots", len(lots))
        return lots

    async def get_forecast(self, lot_id: str, from_date: datetime, to_date: datetime) -> Any | None:
        """Return the raw timespan payload for a lot, or None if the request failed."""
        if not isinstance(lot_id, str) or not lot_id.strip():
            raise ValidationError("lot_id is required.")
        params = {
            "from": format_forecast_timestamp(from_date),
            "to": format_forecast_timestamp(to_date),
        }
        path = TIMESPAN_ENDPOINT.format(city=self._city, lot_id=quote(lot_id.strip(), safe=""))
        url = self._build_url(path)
        _LOGGER.debug("get_forecast started for %s", lot_id)
        try:
            data = await self._get_json(url, params=params, log_errors=False)
        except UpdateFailedError as exc:
            _LOGGER.warning("Forecast request for %s failed: %s", lot_id, exc)
            return None
        _LOGGER.debug("get_forecast completed for %s", lot_id)
        return data

    async def get_notification(self) -> Notification | None:
        """Return a notification that has not been shown before, if any."""
        try:
            data = await self._get_json(self._notification_url, log_errors=False)
        except UpdateFailedError:
            return None
        notification = map_notification(data)
        if not await asyncio.to_thread(self._gate.check_and_record, notification):
            return None
        return notification

    async def _get_json(
        self,
        url: str,
        *,
        params: dict[str, str] | None = None,
        log_errors: bool = True,
    ) -> Any:
        try:
            return await self._request_json(url, params=params)
        except UpdateFailedError as exc:
            if log_errors:
                _LOGGER.error("Request to %s failed: %s", url, exc)
            raise

    async def _request_json(self, url: str, *, params: dict[str, str] | None) -> Any:
        session = self._ensure_session()
        try:
            async with session.request(
                "GET",
                url,
                params=params,
                headers=DEFAULT_HEADERS,
                timeout=self._timeout,
            ) as response:
                if response.status != 200:
                    raise RequestError(f"Request failed with status {response.status}.")
                try:
                    text = await response.text()
                    if not text.strip():
                        raise ServerError("Response body was empty.")
                    return json.loads(text)
                except (aiohttp.ClientError, TimeoutError, ValueError) as exc:
                    raise ServerError("Response did not contain valid JSON.") from exc
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise RequestError("Network request failed.") from exc

    def _build_url(self, path: str) -> str:
        if not isinstance(path, str) or not path:
            raise ValidationError("Path must be a non-empty string.")
        normalized_path = path if path.startswith("/") else f"/{path}"
        return f"{self._base_url}{normalized_path}"

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    def _normalize_base_url(self, base_url: str) -> str:
        return self._require_absolute_url(base_url, "base_url").rstrip("/")

    def _require_absolute_url(self, value: str, field: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{field} must be a non-empty string.")
        normalized = value.strip()
        if not normalized.startswith(("http://", "https://")):
            raise ValidationError(f"{field} must be an absolute http(s) URL.")
        return normalized
