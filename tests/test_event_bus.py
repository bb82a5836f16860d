import threading
import time

import config
from sfx.control_events import ControlEvent, EVENT_SESSION_ERROR
from sfx.event_bus import EventBus


def test_event_bus_drop_oldest(monkeypatch):
    monkeypatch.setattr(config, "EVENT_BUS_MAX_QUEUE", 1)
    monkeypatch.setattr(config, "EVENT_BUS_DROP_POLICY", "drop_oldest")
    monkeypatch.setattr(config, "EVENT_BUS_ENFORCE_WHITELIST", False)

    bus = EventBus(debug=False)
    release = threading.Event()
    received = []

    def handler(event):
        release.wait(1.0)
        received.append(event.payload["n"])

    bus.subscribe("evt", handler)
    bus.start()

    bus.publish(ControlEvent.now("evt", {"n": 1}, source="test"))
    time.sleep(0.1)  # dispatcher is now blocked inside handler(1)
    bus.publish(ControlEvent.now("evt", {"n": 2}, source="test"))
    bus.publish(ControlEvent.now("evt", {"n": 3}, source="test"))
    release.set()

    assert bus.drain(timeout=2.0)
    bus.stop()

    assert received == [1, 3]
    assert bus.get_stats()["dropped"] == 1


def test_unknown_events_are_rejected():
    bus = EventBus()
    bus.start()
    try:
        assert bus.publish(ControlEvent.now("not.a.host.event")) is False
        assert bus.publish(ControlEvent.now(EVENT_SESSION_ERROR)) is True
    finally:
        bus.stop()


def test_publish_before_start_is_dropped():
    bus = EventBus()
    assert bus.publish(ControlEvent.now(EVENT_SESSION_ERROR)) is False


def test_handler_errors_do_not_stop_dispatch():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EVENT_SESSION_ERROR, broken)
    bus.subscribe(EVENT_SESSION_ERROR, lambda event: received.append(event.name))
    bus.start()

    bus.publish(ControlEvent.now(EVENT_SESSION_ERROR))
    bus.publish(ControlEvent.now(EVENT_SESSION_ERROR))
    assert bus.drain()
    bus.stop()

    assert received == [EVENT_SESSION_ERROR, EVENT_SESSION_ERROR]
    assert bus.get_stats()["handler_errors"] == 2


def test_events_are_handled_in_order_on_one_thread():
    bus = EventBus()
    seen = []
    bus.subscribe(EVENT_SESSION_ERROR, lambda e: seen.append((e.payload["n"], threading.get_ident())))
    bus.start()

    for n in range(50):
        bus.publish(ControlEvent.now(EVENT_SESSION_ERROR, {"n": n}))
    assert bus.drain()
    bus.stop()

    assert [n for n, _ in seen] == list(range(50))
    assert len({ident for _, ident in seen}) == 1
