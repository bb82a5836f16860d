import pytest

from fixtures import RecordingSpawner, SinkCollector, touch
from sfx.settings import SfxConfig
from sfx.sound_events import SOUND_EVENTS


@pytest.fixture
def spawner():
    return RecordingSpawner()


@pytest.fixture
def sink():
    return SinkCollector()


@pytest.fixture
def sound_root(tmp_path):
    return str(tmp_path / "sounds")


@pytest.fixture
def sfx_config(tmp_path, sound_root):
    return SfxConfig(sound_root=sound_root, config_path=str(tmp_path / "opencode-sfx.json"))


@pytest.fixture
def bundled_root(tmp_path):
    """Small bundled tree: two files per event plus a nested extra."""
    root = tmp_path / "bundled"
    for event in SOUND_EVENTS:
        touch(root / event / f"{event}_1.wav", b"bundled-1")
        touch(root / event / f"{event}_2.ogg", b"bundled-2")
    touch(root / "stop" / "extras" / "long.mp3", b"nested")
    return str(root)
