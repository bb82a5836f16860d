"""
Player Resolver - choose the external command that plays sound files

Resolved once at startup. A configured playerCommand wins (and is never
second-guessed by a fallback); otherwise platform defaults are probed in
priority order.
"""

import subprocess
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import config


@dataclass(frozen=True)
class PlayerCommand:
    """Resolved player: command plus fixed argument prefix."""
    command: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    def argv(self, sound_path: str) -> List[str]:
        return [self.command, *self.args, sound_path]


@dataclass(frozen=True)
class PlayerResolution:
    player: Optional[PlayerCommand]
    warning: Optional[str] = None


def is_bare_command(command: str) -> bool:
    return "/" not in command and "\\" not in command


def command_exists(command: str) -> bool:
    """True if command is found on PATH. Never raises."""
    checker = "where" if sys.platform == "win32" else "which"
    try:
        result = subprocess.run(
            [checker, command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=getattr(config, "PLAYER_PROBE_TIMEOUT", 2.0),
        )
    except (OSError, subprocess.SubprocessError):
        return False
    return result.returncode == 0


def default_candidates(platform: str) -> List[PlayerCommand]:
    """Platform players in priority order."""
    if platform == "darwin":
        return [PlayerCommand("afplay")]
    if platform.startswith("linux"):
        return [
            PlayerCommand("paplay"),
            PlayerCommand("aplay"),
            PlayerCommand("ffplay", tuple(getattr(config, "FFPLAY_ARGS", ()))),
        ]
    return []


def resolve_player(
    sfx_config,
    platform: Optional[str] = None,
    exists: Callable[[str], bool] = command_exists,
) -> PlayerResolution:
    """
    Resolve the player for this process.

    Args:
        sfx_config: SfxConfig (player_command, player_args, config_path)
        platform: sys.platform value (injectable for tests)
        exists: PATH probe (injectable for tests)

    Returns:
        PlayerResolution with either a player or a warning
    """
    platform = platform or sys.platform
    configured = sfx_config.player_command

    if configured:
        if is_bare_command(configured) and not exists(configured):
            return PlayerResolution(
                player=None,
                warning=f'Configured playerCommand "{configured}" was not found in PATH.',
            )
        return PlayerResolution(player=PlayerCommand(configured, tuple(sfx_config.player_args)))

    for candidate in default_candidates(platform):
        if exists(candidate.command):
            return PlayerResolution(player=candidate)

    return PlayerResolution(
        player=None,
        warning=(
            "No audio player found. Install afplay (macOS) or paplay/aplay/ffplay (Linux), "
            f"or set playerCommand in {sfx_config.config_path}."
        ),
    )
