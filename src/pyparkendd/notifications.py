"""One-shot notification de-duplication."""

from __future__ import annotations

import logging
import threading

from .const import SEEN_NOTIFICATIONS_KEY
from .models import Notification
from .state import StateStore

_LOGGER = logging.getLogger(__name__)


class NotificationGate:
    """Decide whether a fetched notification should be shown.

    A notification is shown at most once per store. The gate is the only
    writer of the seen list, and its read-check-append-persist sequence runs
    under a lock so concurrent fetches cannot record an id twice.
    """

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._lock = threading.Lock()

    def seen_ids(self) -> list[int]:
        with self._lock:
            return self._load()

    def check_and_record(self, notification: Notification) -> bool:
        if not notification.display:
            return False
        with self._lock:
            seen = self._load()
            if notification.id in seen:
                return False
            seen.append(notification.id)
            self._store.set(SEEN_NOTIFICATIONS_KEY, seen)
        _LOGGER.debug("Notification %s recorded as seen", notification.id)
        return True

    def _load(self) -> list[int]:
        raw = self._store.get(SEEN_NOTIFICATIONS_KEY)
        if not isinstance(raw, list):
            return []
        return [item for item in raw if isinstance(item, int) and not isinstance(item, bool)]
