"""
Settings Loader - user configuration for sound effects

Reads the JSON settings file, validates it field by field and applies
defaults. Never raises: a broken file yields the defaults plus a warning
string that the engine surfaces at startup.

Example settings file:

    {
        "enabled": true,
        "playerCommand": "mpv",
        "playerArgs": ["--no-video", "--really-quiet"],
        "events": {"prompt-submit": false},
        "soundRoot": "~/sounds/opencode",
        "eventFolders": {"stop": "./done-sounds"}
    }
"""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import config
from sfx.sound_events import SOUND_EVENTS


@dataclass
class SfxConfig:
    """Validated settings with defaults applied."""
    enabled: bool = True
    player_command: Optional[str] = None
    player_args: List[str] = field(default_factory=list)
    events: Dict[str, bool] = field(default_factory=lambda: {name: True for name in SOUND_EVENTS})
    sound_root: str = ""
    event_folders: Dict[str, Optional[str]] = field(default_factory=dict)
    config_path: str = ""

    def __post_init__(self):
        if not self.config_path:
            self.config_path = config.CONFIG_PATH
        if not self.sound_root:
            self.sound_root = os.path.abspath(os.path.expanduser(config.DEFAULT_SOUND_ROOT))

    def is_event_enabled(self, event: str) -> bool:
        return bool(self.events.get(event, False))

    def folder_for(self, event: str) -> str:
        """Configured folder override, else <sound_root>/<event>."""
        return self.event_folders.get(event) or os.path.join(self.sound_root, event)

    def folder_map(self) -> Dict[str, str]:
        return {event: self.folder_for(event) for event in SOUND_EVENTS}


def _optional_string(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def _resolve_path(value: str, base_dir: str) -> str:
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return os.path.normpath(expanded)
    return os.path.normpath(os.path.join(base_dir, expanded))


def parse_settings(raw, config_path: str) -> SfxConfig:
    """
    Build SfxConfig from decoded JSON.

    Args:
        raw: Decoded JSON document (must be a dict)
        config_path: Settings file path, used to resolve relative paths

    Raises:
        ValueError: If the document is not a JSON object
    """
    if not isinstance(raw, dict):
        raise ValueError("Configuration must be a JSON object")

    base_dir = os.path.dirname(os.path.abspath(config_path))
    raw_events = raw.get("events") if isinstance(raw.get("events"), dict) else {}
    raw_folders = raw.get("eventFolders") if isinstance(raw.get("eventFolders"), dict) else {}
    raw_args = raw.get("playerArgs") if isinstance(raw.get("playerArgs"), list) else []

    events = {}
    for name in SOUND_EVENTS:
        value = raw_events.get(name)
        events[name] = value if isinstance(value, bool) else True

    folders = {}
    for name in SOUND_EVENTS:
        folder = _optional_string(raw_folders.get(name))
        if folder:
            folders[name] = _resolve_path(folder, base_dir)

    sound_root = _optional_string(raw.get("soundRoot"))
    enabled = raw.get("enabled")

    return SfxConfig(
        enabled=enabled if isinstance(enabled, bool) else True,
        player_command=_optional_string(raw.get("playerCommand")),
        player_args=[arg for arg in raw_args if isinstance(arg, str)],
        events=events,
        sound_root=_resolve_path(sound_root, base_dir) if sound_root else "",
        event_folders=folders,
        config_path=config_path,
    )


def load_settings(path: Optional[str] = None) -> Tuple[SfxConfig, List[str]]:
    """
    Load settings from disk.

    Returns:
        (config, warnings). A missing file gives defaults and no warnings;
        an unreadable or malformed file gives defaults and one warning.
    """
    path = path or config.CONFIG_PATH
    if not os.path.exists(path):
        return SfxConfig(config_path=path), []

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        return parse_settings(raw, path), []
    except (OSError, ValueError) as e:
        return SfxConfig(config_path=path), [f"Failed to parse {path}: {e}"]
