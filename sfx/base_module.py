from typing import Callable, Dict

from sfx.logging_utils import setup_logger


class BaseModule:
    """Tiny base class for shared logger/debug/event-bus wiring."""

    def __init__(self, name: str, debug: bool = False, verbose: bool = True, event_bus=None):
        self.debug = debug
        self.verbose = verbose
        self.event_bus = event_bus
        self.logger = setup_logger(name, debug=debug, verbose=verbose)

    def subscribe_all(self, handlers: Dict[str, Callable]):
        """Subscribe each event name to its handler on the attached bus."""
        for event_name, handler in handlers.items():
            self.event_bus.subscribe(event_name, handler)
