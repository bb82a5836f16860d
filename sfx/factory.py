"""
Factory Module - wiring for the sound engine

Builds ready-to-use instances from configuration:
- settings -> bootstrap -> library -> player -> engine
- engine + event bus -> host event bridge

Every collaborator can be overridden, which is how the tests swap in
temporary folders, fake players and recording spawners.
"""

import random
from typing import Callable, Optional, Tuple

import config
from sfx.bootstrap import ensure_sound_tree
from sfx.event_bus import EventBus
from sfx.host_events import HostEventBridge
from sfx.player_resolver import command_exists, resolve_player
from sfx.settings import SfxConfig, load_settings
from sfx.sound_engine import SoundEngine
from sfx.sound_library import SoundLibrary


def create_sound_engine(
    sfx_config: Optional[SfxConfig] = None,
    bundled_root: Optional[str] = None,
    platform: Optional[str] = None,
    exists: Callable[[str], bool] = command_exists,
    rng: Optional[random.Random] = None,
    debug: bool = False,
    verbose: bool = True,
    **engine_kwargs,
) -> SoundEngine:
    """
    Create SoundEngine with startup work done.

    Args:
        sfx_config: Settings (loaded from config.CONFIG_PATH if None)
        bundled_root: Default sound tree (config.BUNDLED_SOUNDS_ROOT if None)
        platform: Platform override for player probing
        exists: PATH probe for player probing
        rng: Random source for selection
        debug: Enable debug logging
        verbose: Enable log output
        **engine_kwargs: Passed through to SoundEngine (log_sink, spawner, ...)

    Returns:
        SoundEngine holding any startup warnings (flushed by start())
    """
    warnings = []
    if sfx_config is None:
        sfx_config, warnings = load_settings()
    bundled_root = bundled_root or config.BUNDLED_SOUNDS_ROOT

    folders, tree_warnings = ensure_sound_tree(sfx_config.sound_root, sfx_config.folder_map(), bundled_root)
    warnings.extend(tree_warnings)

    library = SoundLibrary(folders, rng=rng)
    resolution = resolve_player(sfx_config, platform=platform, exists=exists)
    if resolution.warning:
        warnings.append(resolution.warning)

    return SoundEngine(
        sfx_config,
        library,
        resolution.player,
        warnings=warnings,
        debug=debug,
        verbose=verbose,
        **engine_kwargs,
    )


def create_event_bridge(
    engine: Optional[SoundEngine] = None,
    event_bus: Optional[EventBus] = None,
    debug: bool = False,
) -> Tuple[EventBus, HostEventBridge]:
    """
    Create a started EventBus with the host bridge subscribed.

    Returns:
        (event_bus, bridge)
    """
    engine = engine or create_sound_engine(debug=debug)
    event_bus = event_bus or EventBus(debug=debug)
    bridge = HostEventBridge(event_bus, engine, debug=debug)
    event_bus.start()
    return event_bus, bridge
