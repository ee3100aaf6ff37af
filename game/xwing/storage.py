"""
High score persistence
"""

from __future__ import annotations

import json
import os
import warnings
from typing import Dict, Optional, Protocol


HIGH_SCORE_KEY = "simpleGameHighScore"


class ScoreStore(Protocol):
    """Named integer store that outlives the process"""

    def get(self, key: str) -> Optional[int]: ...

    def set(self, key: str, value: int) -> None: ...


class MemoryScoreStore:
    """In-process store; handy for tests and headless runs"""

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self.values: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return self.values.get(key)

    def set(self, key: str, value: int) -> None:
        self.values[key] = int(value)


class JsonScoreStore:
    """
    Store backed by a small JSON object on disk.

    Reads never raise: a missing file means "no value" and an unreadable or
    corrupt one is reported with a warning. Writes raise ``OSError`` on
    failure and leave handling to the caller.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, int]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            warnings.warn(f"Could not read score store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            warnings.warn(f"Ignoring malformed score store {self.path}")
            return {}
        return data

    def get(self, key: str) -> Optional[int]:
        value = self._read().get(key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            warnings.warn(f"Ignoring non-integer value for {key!r} in {self.path}")
            return None

    def set(self, key: str, value: int) -> None:
        data = self._read()
        data[key] = int(value)

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        # Write then rename so a crash never leaves a truncated file
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
