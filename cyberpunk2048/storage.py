# -*- coding: utf-8 -*-
"""
Best score persistence.

The game only ever stores one integer, behind a small key-value interface so that the file backed
store used by the application can be swapped for an in-memory one in tests.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "bestScore"


class KeyValueStore(Protocol):
    """Minimal string key-value storage."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Store kept in a dictionary, lost when the process ends."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store persisted as a flat JSON object.

    The file is read on every ``get`` and rewritten on every ``set``; the store holds a handful of
    keys so this stays cheap.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except ValueError:
            logger.warning("Overwriting unreadable store %s", self.path)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle)


class BestScore:
    """
    Best score across sessions.

    The stored value is read once at construction; a missing, non-numeric or unreadable entry
    counts as 0. ``record`` writes back only when a score beats the best.
    """

    def __init__(self, store: KeyValueStore, key: str = BEST_SCORE_KEY):
        self._store = store
        self._key = key
        self.value = self._read()

    def _read(self) -> int:
        try:
            raw = self._store.get(self._key)
            return max(int(float(raw)), 0) if raw is not None else 0
        except (OSError, ValueError, OverflowError) as error:
            logger.warning("Ignoring stored best score: %s", error)
            return 0

    def record(self, score: int) -> bool:
        """
        Update the best score if ``score`` exceeds it.

        Parameters
        ----------
        score : int
            Current score of the session.

        Returns
        -------
        bool
            True when a new best was recorded.
        """
        if score <= self.value:
            return False

        self.value = score
        try:
            self._store.set(self._key, str(score))
        except OSError as error:
            logger.warning("Could not persist best score %d: %s", score, error)
        logger.info("New best score: %d", score)
        return True
