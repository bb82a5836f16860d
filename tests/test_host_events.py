"""
Tests for HostEventBridge - host notifications -> sound triggers
"""

from unittest.mock import Mock

import pytest

from sfx.control_events import (
    EVENT_COMMAND_EXECUTE,
    EVENT_PERMISSION_ASK,
    EVENT_PERMISSION_UPDATED,
    EVENT_PLUGIN_LOADED,
    EVENT_SESSION_CREATED,
    EVENT_SESSION_ERROR,
    EVENT_SESSION_STATUS,
    ControlEvent,
)
from sfx.event_bus import EventBus
from sfx.host_events import HostEventBridge, status_type
from sfx.sound_events import (
    SOUND_NOTIFICATION,
    SOUND_PERMISSION,
    SOUND_PROMPT_SUBMIT,
    SOUND_SESSION_CREATED,
)


@pytest.fixture
def bus():
    event_bus = EventBus()
    event_bus.start()
    yield event_bus
    event_bus.stop()


@pytest.fixture
def engine():
    return Mock()


def _send(bus, name, payload=None):
    assert bus.publish(ControlEvent.now(name, payload or {}, source="test"))
    assert bus.drain()


def test_plugin_loaded_starts_engine(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_PLUGIN_LOADED)
    engine.start.assert_called_once_with()


def test_session_created(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_SESSION_CREATED, {"info": {"id": "ses_1"}})
    engine.play.assert_called_once_with(SOUND_SESSION_CREATED)


def test_prompt_submit_command_only(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_COMMAND_EXECUTE, {"command": "session.new"})
    engine.play.assert_not_called()

    _send(bus, EVENT_COMMAND_EXECUTE, {"command": "prompt.submit"})
    engine.play.assert_called_once_with(SOUND_PROMPT_SUBMIT)


def test_session_error_is_notification(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_SESSION_ERROR, {"error": {"name": "ProviderError"}})
    engine.play.assert_called_once_with(SOUND_NOTIFICATION)


def test_session_status_forwarded(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_SESSION_STATUS, {"sessionID": "S1", "status": {"type": "busy"}})
    _send(bus, EVENT_SESSION_STATUS, {"sessionID": "S1", "status": "idle"})

    assert engine.on_session_status.call_args_list[0][0] == ("S1", "busy")
    assert engine.on_session_status.call_args_list[1][0] == ("S1", "idle")


def test_session_status_without_id_ignored(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_SESSION_STATUS, {"status": {"type": "idle"}})
    engine.on_session_status.assert_not_called()


@pytest.mark.parametrize("name", [EVENT_PERMISSION_ASK, EVENT_PERMISSION_UPDATED])
def test_both_permission_events_play_permission(bus, engine, name):
    HostEventBridge(bus, engine)
    _send(bus, name, {"id": "per_1"})
    engine.play.assert_called_once_with(SOUND_PERMISSION)


def test_same_permission_announced_once(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_PERMISSION_UPDATED, {"id": "per_1"})
    _send(bus, EVENT_PERMISSION_ASK, {"id": "per_1"})
    _send(bus, EVENT_PERMISSION_ASK, {"id": "per_2"})

    assert engine.play.call_count == 2


def test_permission_without_id_always_plays(bus, engine):
    HostEventBridge(bus, engine)
    _send(bus, EVENT_PERMISSION_ASK)
    _send(bus, EVENT_PERMISSION_ASK)
    assert engine.play.call_count == 2


def test_status_type():
    assert status_type("idle") == "idle"
    assert status_type({"type": "busy", "attempt": 2}) == "busy"
    assert status_type(None) == ""
    assert status_type({}) == ""
