"""
Sound Engine - trigger -> selection -> detached player

Owns all mutable playback state for one process: candidate sets and
selection memory (via SoundLibrary), the session registry (via
SessionTracker) and the set of events already warned about having no
sounds. Nothing here raises to the caller; failures degrade to silence
plus a log line.

Example Usage:
    engine = create_sound_engine()
    engine.start()                       # plays "start"
    engine.play(SOUND_PROMPT_SUBMIT)
    engine.on_session_status("ses_1", "busy")
    engine.on_session_status("ses_1", "idle")   # plays "stop" once
"""

import os
import threading
from typing import Callable, List, Optional, Set

from sfx.audio_player import spawn_detached
from sfx.base_module import BaseModule
from sfx.logging_utils import log_audio, log_debug, make_log_sink
from sfx.player_resolver import PlayerCommand
from sfx.session_tracker import SessionTracker
from sfx.sound_events import SOUND_START, SOUND_STOP
from sfx.sound_library import SoundLibrary

LogSink = Callable[[str, str], None]


class SoundEngine(BaseModule):
    """Plays one random sound per trigger."""

    def __init__(
        self,
        sfx_config,
        library: SoundLibrary,
        player: Optional[PlayerCommand],
        warnings: Optional[List[str]] = None,
        log_sink: Optional[LogSink] = None,
        spawner: Callable = spawn_detached,
        exists: Callable[[str], bool] = os.path.isfile,
        session_tracker: Optional[SessionTracker] = None,
        debug: bool = False,
        verbose: bool = True,
    ):
        """
        Args:
            sfx_config: Validated SfxConfig
            library: Candidate sets for every event
            player: Resolved player, or None when playback is unavailable
            warnings: Startup warnings (settings, bootstrap, resolver)
            log_sink: (level, message) receiver; defaults to this module's logger
            spawner: spawn_detached-compatible launcher
            exists: File existence probe used before each play
            session_tracker: Injected tracker (created if None)
            debug: Enable debug logging
            verbose: Enable log output
        """
        super().__init__(__name__, debug=debug, verbose=verbose)
        self.config = sfx_config
        self.library = library
        self.player = player
        self.startup_warnings = list(warnings or [])
        self.log_sink = log_sink or make_log_sink(self.logger)
        self.spawner = spawner
        self.exists = exists
        self.sessions = session_tracker or SessionTracker()
        self._missing_warned: Set[str] = set()
        self._lock = threading.Lock()

    def _emit(self, level: str, message: str):
        try:
            self.log_sink(level, message)
        except Exception:
            return

    def flush_warnings(self):
        """Send accumulated startup warnings to the log sink, once."""
        for warning in self.startup_warnings:
            self._emit("warning", warning)
        self.startup_warnings = []

    def start(self) -> Optional[str]:
        """Flush startup warnings, then play the start sound."""
        self.flush_warnings()
        return self.play(SOUND_START)

    def play(self, event: str) -> Optional[str]:
        """
        Play a random sound for event.

        Returns:
            Path handed to the player, or None if nothing was launched
        """
        if not self.config.enabled or not self.config.is_event_enabled(event) or self.player is None:
            return None

        with self._lock:
            path = self.library.next_existing(event, exists=self.exists)
            if path is None:
                if event not in self._missing_warned:
                    self._missing_warned.add(event)
                    folder = self.library.folders.get(event, "")
                    self._emit("warning", f'No sound files found for "{event}" in {folder}')
                return None

        if self.debug:
            log_debug(self.logger, f"{event}: {os.path.basename(path)}")

        def on_error(error: Exception):
            self._emit("error", f'Failed to play "{event}" sound: {error}')

        process = self.spawner(self.player.argv(path), on_error=on_error)
        if process is None:
            return None
        if self.debug:
            log_audio(self.logger, f"Playing {event} via {self.player.command}")
        return path

    def on_session_status(self, session_id: str, status: str) -> Optional[str]:
        """Feed a session status; plays the stop sound on active -> idle."""
        with self._lock:
            fire = self.sessions.observe(session_id, status)
        if fire:
            return self.play(SOUND_STOP)
        return None
