import logging
import os
import sys
from typing import List, Tuple

import config


def resolve_outputs(debug: bool = False) -> Tuple[List[str], str]:
    """Output kinds and file path from config (debug knobs win when debugging)."""
    outputs = getattr(config, "LOG_OUTPUTS", "stderr")
    log_file_path = getattr(config, "LOG_FILE_PATH", "sfx.log")
    if debug:
        outputs = getattr(config, "DEBUG_LOG_OUTPUTS", outputs)
        log_file_path = getattr(config, "DEBUG_LOG_FILE_PATH", log_file_path)
    kinds = [part.strip().lower() for part in outputs.split(",") if part.strip()]
    return kinds, log_file_path


def build_handlers(verbose: bool = True, debug: bool = False) -> List[logging.Handler]:
    if not verbose:
        return []

    kinds, log_file_path = resolve_outputs(debug)
    handlers: List[logging.Handler] = []

    for kind in kinds:
        if kind == "stdout":
            handlers.append(logging.StreamHandler(sys.stdout))
        elif kind == "stderr":
            handlers.append(logging.StreamHandler(sys.stderr))
        elif kind == "file":
            log_dir = os.path.dirname(log_file_path)
            try:
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))
            except OSError as e:
                # Unwritable log file: keep the other outputs
                print(f"sfx: cannot open log file {log_file_path}: {e}", file=sys.stderr)
        elif kind == "none":
            return [logging.NullHandler()]

    if not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    return handlers
