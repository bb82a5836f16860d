from typing import Optional, Set

import config


class SessionTracker:
    """
    Active/idle bookkeeping per host session.

    A session is registered when it is seen busy and removed the first time
    it is seen idle again; only that transition asks for a stop sound.
    Repeated idle notifications, or idle for a never-busy session, do nothing.
    """

    def __init__(self, idle_status: Optional[str] = None):
        self.idle_status = idle_status or getattr(config, "IDLE_STATUS", "idle")
        self._active: Set[str] = set()

    def observe(self, session_id: str, status: str) -> bool:
        """Record a status change. True when a stop sound should fire."""
        if status == self.idle_status:
            if session_id in self._active:
                self._active.discard(session_id)
                return True
            return False

        self._active.add(session_id)
        return False

    def is_active(self, session_id: str) -> bool:
        return session_id in self._active

    @property
    def active_sessions(self) -> Set[str]:
        return set(self._active)
