import config
from sfx.base_module import BaseModule
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
from sfx.logging_utils import log_debug
from sfx.sound_events import (
    SOUND_NOTIFICATION,
    SOUND_PERMISSION,
    SOUND_PROMPT_SUBMIT,
    SOUND_SESSION_CREATED,
)


def status_type(status) -> str:
    """Host sends either "idle" or {"type": "idle", ...}."""
    if isinstance(status, dict):
        return str(status.get("type") or "")
    return str(status or "")


class HostEventBridge(BaseModule):
    """Translate host notifications into sound triggers."""

    def __init__(self, event_bus, engine, debug: bool = False):
        super().__init__(__name__, debug=debug, event_bus=event_bus)
        self.engine = engine
        self._last_permission_id = None
        self._register_handlers()

    def _register_handlers(self):
        self.subscribe_all({
            EVENT_PLUGIN_LOADED: self._on_plugin_loaded,
            EVENT_SESSION_CREATED: self._on_session_created,
            EVENT_COMMAND_EXECUTE: self._on_command_execute,
            EVENT_SESSION_STATUS: self._on_session_status,
            EVENT_SESSION_ERROR: self._on_session_error,
            EVENT_PERMISSION_UPDATED: self._on_permission,
            EVENT_PERMISSION_ASK: self._on_permission,
        })

    def _on_plugin_loaded(self, event: ControlEvent):
        self.engine.start()

    def _on_session_created(self, event: ControlEvent):
        self.engine.play(SOUND_SESSION_CREATED)

    def _on_command_execute(self, event: ControlEvent):
        if event.payload.get("command") != config.PROMPT_SUBMIT_COMMAND:
            return
        self.engine.play(SOUND_PROMPT_SUBMIT)

    def _on_session_status(self, event: ControlEvent):
        session_id = event.payload.get("sessionID")
        if not session_id:
            log_debug(self.logger, "session.status without sessionID ignored")
            return
        self.engine.on_session_status(session_id, status_type(event.payload.get("status")))

    def _on_session_error(self, event: ControlEvent):
        self.engine.play(SOUND_NOTIFICATION)

    def _on_permission(self, event: ControlEvent):
        # permission.ask and permission.updated can both announce one request
        permission_id = event.payload.get("id") or event.payload.get("permissionID")
        if permission_id and permission_id == self._last_permission_id:
            log_debug(self.logger, f"Permission {permission_id} already announced")
            return
        self._last_permission_id = permission_id
        self.engine.play(SOUND_PERMISSION)
