import threading

from pyparkendd.const import SEEN_NOTIFICATIONS_KEY
from pyparkendd.models import Notification
from pyparkendd.notifications import NotificationGate
from pyparkendd.state import MemoryStateStore


def _notification(notification_id: int, *, display: bool = True) -> Notification:
    return Notification(id=notification_id, title="Hinweis", text="Text", display=display)


def test_first_display_is_recorded() -> None:
    store = MemoryStateStore()
    gate = NotificationGate(store)
    assert gate.check_and_record(_notification(42)) is True
    assert store.get(SEEN_NOTIFICATIONS_KEY) == [42]
    assert gate.check_and_record(_notification(42)) is False
    assert store.get(SEEN_NOTIFICATIONS_KEY) == [42]


def test_display_false_is_never_recorded() -> None:
    store = MemoryStateStore()
    gate = NotificationGate(store)
    assert gate.check_and_record(_notification(7, display=False)) is False
    assert gate.seen_ids() == []


def test_malformed_seen_list_is_treated_as_empty() -> None:
    store = MemoryStateStore({SEEN_NOTIFICATIONS_KEY: "garbage"})
    gate = NotificationGate(store)
    assert gate.seen_ids() == []
    assert gate.check_and_record(_notification(1)) is True
    assert store.get(SEEN_NOTIFICATIONS_KEY) == [1]


def test_seen_list_drops_non_integer_entries() -> None:
    store = MemoryStateStore({SEEN_NOTIFICATIONS_KEY: [3, "4", True, None]})
    assert NotificationGate(store).seen_ids() == [3]


def test_concurrent_checks_record_once() -> None:
    store = MemoryStateStore()
    gate = NotificationGate(store)
    results: list[bool] = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        results.append(gate.check_and_record(_notification(99)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
    assert store.get(SEEN_NOTIFICATIONS_KEY) == [99]
