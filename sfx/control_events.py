from dataclasses import dataclass
from typing import Any, Dict, Optional, Set
import time


# Host notifications understood by the bridge
EVENT_PLUGIN_LOADED = "plugin.loaded"
EVENT_SESSION_CREATED = "session.created"
EVENT_COMMAND_EXECUTE = "tui.command.execute"
EVENT_SESSION_STATUS = "session.status"
EVENT_SESSION_ERROR = "session.error"
EVENT_PERMISSION_UPDATED = "permission.updated"
EVENT_PERMISSION_ASK = "permission.ask"


@dataclass(frozen=True)
class ControlEvent:
    name: str
    payload: Dict[str, Any]
    timestamp: float
    source: Optional[str] = None
    correlation_id: Optional[str] = None

    @staticmethod
    def now(
        name: str,
        payload: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> "ControlEvent":
        return ControlEvent(
            name=name,
            payload=payload or {},
            timestamp=time.time(),
            source=source,
            correlation_id=correlation_id,
        )


def new_event(
    name: str,
    payload: Optional[Dict[str, Any]] = None,
    source: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> ControlEvent:
    """Helper to create ControlEvent with consistent metadata."""
    return ControlEvent.now(
        name=name,
        payload=payload,
        source=source,
        correlation_id=correlation_id,
    )


ALLOWED_EVENTS: Set[str] = {
    EVENT_PLUGIN_LOADED,
    EVENT_SESSION_CREATED,
    EVENT_COMMAND_EXECUTE,
    EVENT_SESSION_STATUS,
    EVENT_SESSION_ERROR,
    EVENT_PERMISSION_UPDATED,
    EVENT_PERMISSION_ASK,
}
