"""Persist the watchlist to a string-keyed store."""

from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from threading import RLock
from typing import Dict, List, Optional

import redis

from .models import Entry

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when the key-value backend cannot be read or written."""


class KeyValueBackend(ABC):
    """String-keyed persistent store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""


class MemoryBackend(KeyValueBackend):
    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JSONFileBackend(KeyValueBackend):
    """Keeps every key in one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = RLock()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Ignoring unreadable store file %s", self.path)
            return {}
        except OSError as exc:
            raise BackendError(f"cannot read {self.path}: {exc}") from exc
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise BackendError(f"cannot write {self.path}: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
            return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)


class RedisBackend(KeyValueBackend):
    def __init__(self, redis_url: str = None, client: Optional[redis.Redis] = None) -> None:
        self.redis_url = redis_url
        self.redis_client = client or redis.from_url(redis_url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis_client.get(key)
        except redis.RedisError as exc:
            raise BackendError(f"redis get {key!r} failed: {exc}") from exc
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.redis_client.set(key, value)
        except redis.RedisError as exc:
            raise BackendError(f"redis set {key!r} failed: {exc}") from exc


def create_backend(kind: str, path: Optional[Path] = None, redis_url: Optional[str] = None) -> KeyValueBackend:
    kind = (kind or "json").lower()
    if kind == "memory":
        return MemoryBackend()
    if kind == "redis":
        logger.info("Using redis store at %s", redis_url)
        return RedisBackend(redis_url)
    if kind == "json":
        logger.info("Using JSON store at %s", path)
        return JSONFileBackend(path)
    raise ValueError(f"unknown watchlist backend: {kind}")


class WatchlistStore:
    """Ordered entry collection, synchronized to a backend under one key."""

    def __init__(self, backend: KeyValueBackend, key: str = "movies") -> None:
        self.backend = backend
        self.key = key
        self._entries: List[Entry] = []

    @property
    def entries(self) -> List[Entry]:
        """Snapshot of the current collection in display order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, index: int) -> Entry:
        self._check_index(index)
        return self._entries[index]

    # -- persistence -----------------------------------------------------
    def load(self) -> List[Entry]:
        """Replace the in-memory collection with the persisted one.

        Missing or corrupt data yields an empty collection.
        """
        self._entries = self._read()
        return self.entries

    def _read(self) -> List[Entry]:
        try:
            raw = self.backend.get(self.key)
        except BackendError as exc:
            logger.error("Loading watchlist failed: %s", exc)
            return []
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Stored watchlist under %r is not valid JSON", self.key)
            return []
        if not isinstance(items, list):
            logger.warning("Stored watchlist under %r is not a list", self.key)
            return []

        entries: List[Entry] = []
        seen_ids = set()
        for item in items:
            try:
                entry = Entry.from_dict(item)
            except (KeyError, ValueError, TypeError, AttributeError):
                logger.warning("Skipping malformed watchlist item: %r", item)
                continue
            if entry.id in seen_ids:
                logger.warning("Skipping watchlist item with repeated id %s", entry.id)
                continue
            seen_ids.add(entry.id)
            entries.append(entry)
        return entries

    def save(self) -> bool:
        payload = json.dumps([entry.to_dict() for entry in self._entries], ensure_ascii=False)
        try:
            self.backend.set(self.key, payload)
        except BackendError as exc:
            logger.error("Saving watchlist failed: %s", exc)
            return False
        return True

    # -- mutation --------------------------------------------------------
    def append(self, entry: Entry) -> int:
        self._entries.append(entry)
        return len(self._entries) - 1

    def replace_at(self, index: int, entry: Entry) -> None:
        self._check_index(index)
        self._entries[index] = entry

    def remove_at(self, index: int) -> Entry:
        self._check_index(index)
        return self._entries.pop(index)

    def next_id(self) -> int:
        candidate = int(time.time() * 1000)
        if self._entries:
            candidate = max(candidate, max(entry.id for entry in self._entries) + 1)
        return candidate

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"watchlist index {index} out of range")
