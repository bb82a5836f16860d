import subprocess
import sys
import threading
from typing import Callable, List, Optional


def spawn_detached(argv: List[str], on_error: Optional[Callable[[Exception], None]] = None):
    """
    Launch a player in the background (non-blocking, fire-and-forget).

    The child gets no stdio from us and runs in its own session, so it
    survives a host that exits right after triggering. A daemon thread reaps
    it; nobody waits on the result. Only an immediate launch failure (missing
    executable, permission denied) is reported, through on_error.

    Returns:
        The Popen handle, or None if the launch failed
    """
    kwargs = {}
    if sys.platform != "win32":
        kwargs["start_new_session"] = True
    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            **kwargs,
        )
    except (OSError, ValueError) as e:
        if on_error:
            on_error(e)
        return None

    threading.Thread(target=process.wait, name="sfx-player-reaper", daemon=True).start()
    return process
