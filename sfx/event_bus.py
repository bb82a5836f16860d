import queue
import threading
import time
from typing import Callable, Dict, List, Optional

import config
from sfx.control_events import ControlEvent, ALLOWED_EVENTS
from sfx.logging_utils import setup_logger, log_debug, log_warning

Handler = Callable[[ControlEvent], None]


class EventBus:
    """
    In-process event bus with a single background dispatcher thread.

    Handlers run one at a time, in publish order, on the dispatcher thread.
    Host notifications therefore reach the sound engine serialized.
    """

    def __init__(self, debug: bool = False):
        self._handlers: Dict[str, List[Handler]] = {}
        maxsize = int(getattr(config, "EVENT_BUS_MAX_QUEUE", 1000))
        self._drop_policy = getattr(config, "EVENT_BUS_DROP_POLICY", "drop_new").lower()
        self._enforce_whitelist = bool(getattr(config, "EVENT_BUS_ENFORCE_WHITELIST", True))
        self._queue: "queue.Queue[ControlEvent]" = queue.Queue(maxsize=maxsize)
        self._stats = {"published": 0, "dispatched": 0, "dropped": 0, "handler_errors": 0}
        self._lock = threading.Lock()
        self._running = False
        self._thread: Optional[threading.Thread] = None
        self.debug = debug
        self.logger = setup_logger(__name__, debug=debug)

    def start(self):
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(target=self._dispatch_loop, name="sfx-event-bus", daemon=True)
        self._thread.start()
        log_debug(self.logger, "EventBus dispatcher started")

    def stop(self, timeout: float = 1.0):
        self._running = False
        if self._thread:
            self._thread.join(timeout=timeout)
            self._thread = None
        log_debug(self.logger, "EventBus dispatcher stopped")

    def subscribe(self, event_name: str, handler: Handler):
        with self._lock:
            self._handlers.setdefault(event_name, []).append(handler)

    def publish(self, event: ControlEvent) -> bool:
        if not self._running:
            log_warning(self.logger, f"EventBus not running; dropping event: {event.name}")
            return False
        if self._enforce_whitelist and event.name not in ALLOWED_EVENTS:
            log_warning(self.logger, f"EventBus unknown event: {event.name}")
            return False
        try:
            self._queue.put_nowait(event)
        except queue.Full:
            if self._drop_policy != "drop_oldest" or not self._discard_oldest():
                self._stats["dropped"] += 1
                log_warning(self.logger, f"EventBus queue full; dropping event: {event.name}")
                return False
            self._queue.put_nowait(event)
        self._stats["published"] += 1
        return True

    def drain(self, timeout: float = 2.0) -> bool:
        """Block until every published event has been handled (or timeout)."""
        deadline = time.monotonic() + timeout
        while self._queue.unfinished_tasks:
            if time.monotonic() >= deadline:
                return False
            time.sleep(0.01)
        return True

    def get_stats(self) -> dict:
        return dict(self._stats)

    def _discard_oldest(self) -> bool:
        try:
            dropped = self._queue.get_nowait()
        except queue.Empty:
            return False
        self._queue.task_done()
        self._stats["dropped"] += 1
        log_warning(self.logger, f"EventBus queue full; dropped oldest event: {dropped.name}")
        return True

    def _dispatch_loop(self):
        while self._running or not self._queue.empty():
            try:
                event = self._queue.get(timeout=0.2)
            except queue.Empty:
                continue

            with self._lock:
                handlers = list(self._handlers.get(event.name, []))

            if self.debug:
                log_debug(self.logger, f"Dispatching event: {event.name} ({len(handlers)} handlers)")

            for handler in handlers:
                try:
                    handler(event)
                except Exception as e:
                    self._stats["handler_errors"] += 1
                    log_warning(self.logger, f"Event handler error for {event.name}: {e}")

            self._stats["dispatched"] += 1
            self._queue.task_done()
