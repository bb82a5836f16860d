"""
Bootstrap Seeder - first-run population of the sound tree

Guarantees that the sound root and every event folder exist. When the
sound root is brand new, the bundled default sounds are merged into it.
User files are never overwritten and nothing is ever deleted.

All failures are collected as warning strings; one bad entry never stops
its siblings from being processed.
"""

import os
import shutil
from typing import Dict, List, Tuple


def _ensure_directory(path: str, warnings: List[str]) -> bool:
    """Create path (recursively) if missing. False if it is unusable."""
    if os.path.exists(path):
        if not os.path.isdir(path):
            warnings.append(f"Sound path exists but is not a directory: {path}")
            return False
        return True
    try:
        os.makedirs(path, exist_ok=True)
        return True
    except OSError as e:
        warnings.append(f"Failed to create sound directory {path}: {e}")
        return False


def merge_tree(source: str, destination: str) -> List[str]:
    """
    Copy source into destination without overwriting anything.

    Directories are mirrored; a file is copied only when nothing exists at
    its destination path.

    Returns:
        Warnings for entries that could not be read, created or copied
    """
    warnings: List[str] = []
    stack = [(source, destination)]

    while stack:
        src_dir, dst_dir = stack.pop()
        if not _ensure_directory(dst_dir, warnings):
            continue
        try:
            entries = sorted(os.scandir(src_dir), key=lambda entry: entry.name)
        except OSError as e:
            warnings.append(f"Failed to read bundled sounds in {src_dir}: {e}")
            continue

        for entry in entries:
            target = os.path.join(dst_dir, entry.name)
            try:
                if entry.is_dir():
                    stack.append((entry.path, target))
                    continue
                if os.path.lexists(target):
                    continue
                shutil.copy2(entry.path, target)
            except OSError as e:
                warnings.append(f"Failed to copy {entry.path} to {target}: {e}")

    return warnings


def _usable_folder(event: str, folder: str, sound_root: str, root_ready: bool, warnings: List[str]) -> str:
    """Folder to scan for event; an unusable override falls back to <sound_root>/<event>."""
    if _ensure_directory(folder, warnings):
        return folder
    fallback = os.path.join(sound_root, event)
    if not root_ready or os.path.normpath(folder) == os.path.normpath(fallback):
        return folder
    if not _ensure_directory(fallback, warnings):
        return folder
    warnings.append(f'Using {fallback} for "{event}" instead of {folder}')
    return fallback


def ensure_sound_tree(
    sound_root: str,
    event_folders: Dict[str, str],
    bundled_root: str,
) -> Tuple[Dict[str, str], List[str]]:
    """
    Prepare the sound tree before the engine accepts triggers.

    Args:
        sound_root: User sound root
        event_folders: Event name -> folder path
        bundled_root: Read-only tree of default sounds shipped with the package

    Returns:
        (folders, warnings): the event folder map to scan, with unusable
        overrides replaced by their default folder, and the warnings
        produced along the way
    """
    warnings: List[str] = []
    first_run = not os.path.exists(sound_root)

    root_ready = _ensure_directory(sound_root, warnings)
    folders = {
        event: _usable_folder(event, folder, sound_root, root_ready, warnings)
        for event, folder in event_folders.items()
    }

    if not (first_run and root_ready):
        return folders, warnings

    if os.path.realpath(sound_root) == os.path.realpath(bundled_root):
        return folders, warnings

    if not os.path.isdir(bundled_root):
        warnings.append(f"Bundled sounds not found: {bundled_root}")
        return folders, warnings

    warnings.extend(merge_tree(bundled_root, sound_root))
    return folders, warnings
