"""
Sound Library - per-event candidate sets and anti-repeat selection

Each event owns a sorted list of playable files (its candidate set) and
remembers the index it played last. Selection is uniform random but never
repeats the previous pick while alternatives exist. Files that vanish
between scan and play are evicted on discovery.
"""

import os
import random
from typing import Callable, Dict, List, Optional

import config


def scan_sound_folder(directory: str) -> List[str]:
    """
    List playable files directly inside directory.

    Extensions are matched case-insensitively against
    config.SUPPORTED_EXTENSIONS; dotfiles and subdirectories are skipped.
    A missing or unreadable directory yields an empty list.
    """
    extensions = tuple(ext.lower() for ext in getattr(config, "SUPPORTED_EXTENSIONS", (".ogg", ".wav", ".mp3")))
    found = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name.startswith("."):
                    continue
                if not entry.name.lower().endswith(extensions):
                    continue
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                found.append(os.path.abspath(entry.path))
    except OSError:
        return []
    return sorted(found)


class SoundLibrary:
    """Candidate sets and selection memory for every event."""

    def __init__(self, folders: Dict[str, str], rng: Optional[random.Random] = None):
        """
        Args:
            folders: Event name -> folder (the event folder map)
            rng: Random source, seeded in tests for reproducibility
        """
        self.folders = dict(folders)
        self._rng = rng or random.Random()
        self._candidates: Dict[str, List[str]] = {}
        self._last_index: Dict[str, int] = {}
        for event in self.folders:
            self.rescan(event)

    def rescan(self, event: str) -> List[str]:
        """Re-derive the candidate set from disk and reset selection memory."""
        self._candidates[event] = scan_sound_folder(self.folders[event])
        self._last_index.pop(event, None)
        return list(self._candidates[event])

    def candidates(self, event: str) -> List[str]:
        return list(self._candidates.get(event, []))

    def select(self, event: str) -> Optional[str]:
        """Pick the next file for event, avoiding an immediate repeat."""
        pool = self._candidates.get(event, [])
        if not pool:
            return None

        if len(pool) == 1:
            index = 0
        else:
            index = self._rng.randrange(len(pool))
            previous = self._last_index.get(event)
            if index == previous:
                # Draw among the other len-1 slots, skipping the previous one
                index = self._rng.randrange(len(pool) - 1)
                if index >= previous:
                    index += 1

        self._last_index[event] = index
        return pool[index]

    def evict(self, event: str, path: str) -> bool:
        """Drop a vanished file and forget the last pick. No-op if absent."""
        pool = self._candidates.get(event, [])
        if path not in pool:
            return False
        pool.remove(path)
        self._last_index.pop(event, None)
        return True

    def next_existing(self, event: str, exists: Callable[[str], bool] = os.path.isfile) -> Optional[str]:
        """Select until a file that still exists comes up, evicting the rest."""
        while True:
            path = self.select(event)
            if path is None:
                return None
            if exists(path):
                return path
            self.evict(event, path)
