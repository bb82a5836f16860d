"""Test doubles and file helpers shared by the sfx test suite."""

import os


class RecordingSpawner:
    """Stands in for spawn_detached: records argv, optionally fails."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def __call__(self, argv, on_error=None):
        self.calls.append(list(argv))
        if self.error is not None:
            if on_error:
                on_error(self.error)
            return None
        return object()

    @property
    def played(self):
        return [argv[-1] for argv in self.calls]


class SinkCollector:
    """(level, message) sink that keeps everything."""

    def __init__(self):
        self.records = []

    def __call__(self, level, message):
        self.records.append((level, message))

    def messages(self, level=None):
        return [m for lvl, m in self.records if level is None or lvl == level]


def touch(path, content=b"RIFF"):
    os.makedirs(os.path.dirname(str(path)), exist_ok=True)
    with open(str(path), "wb") as f:
        f.write(content)
    return str(path)
