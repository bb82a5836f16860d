"""
Command-line entry point (sfx-hooks)

    sfx-hooks play <event>     play one random sound for a trigger
    sfx-hooks bootstrap        create/seed the sound tree and list it
    sfx-hooks doctor           show settings, player and candidate counts
    sfx-hooks listen           read host events as JSON lines from stdin

`listen` expects one object per line, {"type": "...", "properties": {...}},
e.g. {"type": "session.status", "properties": {"sessionID": "s1", "status": {"type": "idle"}}}
"""

import argparse
import json
import sys
from typing import List, Optional

import config
from sfx.control_events import new_event
from sfx.factory import create_event_bridge, create_sound_engine
from sfx.logging_utils import log_warning, setup_logger
from sfx.sound_events import SOUND_EVENTS


def _cmd_play(args) -> int:
    engine = create_sound_engine(debug=args.debug)
    engine.flush_warnings()
    path = engine.play(args.event)
    if path and args.debug:
        print(path)
    return 0


def _cmd_bootstrap(args) -> int:
    engine = create_sound_engine(debug=args.debug)
    engine.flush_warnings()
    print(f"Sound root: {engine.config.sound_root}")
    for event in SOUND_EVENTS:
        print(f"  {event:<16} {len(engine.library.candidates(event)):>3} file(s)  {engine.library.folders[event]}")
    return 0


def _cmd_doctor(args) -> int:
    engine = create_sound_engine(debug=args.debug, verbose=False)
    cfg = engine.config
    print(f"Settings:   {cfg.config_path}")
    print(f"Enabled:    {cfg.enabled}")
    if engine.player:
        print(f"Player:     {' '.join([engine.player.command, *engine.player.args])}")
    else:
        print("Player:     (none)")
    for event in SOUND_EVENTS:
        state = "on " if cfg.is_event_enabled(event) else "off"
        print(f"  [{state}] {event:<16} {len(engine.library.candidates(event)):>3} file(s)")
    for warning in engine.startup_warnings:
        print(f"Warning:    {warning}")
    return 0


def _cmd_listen(args) -> int:
    logger = setup_logger(__name__, debug=args.debug)
    event_bus, _ = create_event_bridge(debug=args.debug)
    try:
        for line in sys.stdin:
            line = line.strip()
            if not line:
                continue
            try:
                message = json.loads(line)
            except json.JSONDecodeError as e:
                log_warning(logger, f"Ignoring malformed host event: {e}")
                continue
            if not isinstance(message, dict) or not message.get("type"):
                log_warning(logger, "Ignoring host event without a type")
                continue
            properties = message.get("properties")
            event_bus.publish(
                new_event(message["type"], properties if isinstance(properties, dict) else {}, source="stdin")
            )
    except KeyboardInterrupt:
        pass
    finally:
        event_bus.drain()
        event_bus.stop()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sfx-hooks", description="Random sound effects for host lifecycle events.")
    parser.add_argument("--debug", action="store_true", default=config.DEBUG, help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play one random sound for an event.")
    play.add_argument("event", choices=SOUND_EVENTS)
    play.set_defaults(func=_cmd_play)

    sub.add_parser("bootstrap", help="Create and seed the sound tree.").set_defaults(func=_cmd_bootstrap)
    sub.add_parser("doctor", help="Show resolved settings and player.").set_defaults(func=_cmd_doctor)
    sub.add_parser("listen", help="Read host events (JSON lines) from stdin.").set_defaults(func=_cmd_listen)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
