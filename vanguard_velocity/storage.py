"""High-score persistence behind a small key-value interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from .config import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """Key-value pairs kept in one JSON object on disk.

    A missing, unreadable or corrupt file reads as empty.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring score file %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")


class HighScoreStore:
    def __init__(self, storage: KeyValueStorage, key: str = HIGH_SCORE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load_high_score(self) -> int:
        """Stored high score; missing or malformed values read as 0."""
        raw = self.storage.get(self.key)
        if raw is None:
            return 0
        try:
            value = int(str(raw).strip())
        except ValueError:
            logger.warning("Malformed high score %r, using 0", raw)
            return 0
        return max(0, value)

    def save_high_score(self, score: int) -> None:
        self.storage.set(self.key, str(int(score)))
