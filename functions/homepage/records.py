"""
Record types and JSON-list collections stored in the key-value store.
"""

from __future__ import annotations

import json
import threading
import time
import weakref
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple

from homepage.kv import KeyValueStore

MESSAGES_KEY = "wall-messages"
CONTACTS_KEY = "contact-submissions"


class MillisecondClock:
    """
    Wall-clock milliseconds that never repeat within the process.

    Two calls in the same millisecond return consecutive values, so record
    ids stay unique while still reading as creation timestamps.
    """

    def __init__(self, time_fn=time.time):
        self._time_fn = time_fn
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            current = int(self._time_fn() * 1000)
            if current <= self._last:
                current = self._last + 1
            self._last = current
            return current


_clock = MillisecondClock()


def now_millis() -> int:
    return _clock.now()


@dataclass
class Message:
    id: int
    name: str
    email: str
    content: str
    timestamp: int

    @classmethod
    def create(
        cls, name: str, content: str, email: Optional[str] = None
    ) -> "Message":
        created = now_millis()
        return cls(
            id=created,
            name=name,
            email=email or "",
            content=content,
            timestamp=created,
        )

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class ContactSubmission:
    id: int
    name: str
    email: str
    message: str
    timestamp: int

    @classmethod
    def create(cls, name: str, email: str, message: str) -> "ContactSubmission":
        created = now_millis()
        return cls(
            id=created,
            name=name,
            email=email,
            message=message,
            timestamp=created,
        )

    def as_dict(self) -> dict:
        return asdict(self)


# Store dataclasses are unhashable, so entries are keyed by id() and paired
# with a weak reference; the entry is dropped when its store is collected.
_store_locks: Dict[int, Tuple[weakref.ref, Dict[str, threading.Lock]]] = {}
_store_locks_guard = threading.RLock()


def _forget_store(store_id: int, ref: weakref.ref) -> None:
    with _store_locks_guard:
        entry = _store_locks.get(store_id)
        if entry is not None and entry[0] is ref:
            del _store_locks[store_id]


def _lock_for(store: KeyValueStore, key: str) -> threading.Lock:
    store_id = id(store)
    with _store_locks_guard:
        entry = _store_locks.get(store_id)
        if entry is None or entry[0]() is not store:
            ref = weakref.ref(store, lambda ref: _forget_store(store_id, ref))
            entry = (ref, {})
            _store_locks[store_id] = entry
        return entry[1].setdefault(key, threading.Lock())


class RecordCollection:
    """
    A JSON-encoded list stored whole under a single key.

    An absent key reads as an empty list. Appends rewrite the full list;
    they are serialized per key within this process only.
    """

    def __init__(self, store: KeyValueStore, key: str):
        self.store = store
        self.key = key

    def load(self) -> list[dict]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        items = json.loads(raw)
        if not isinstance(items, list):
            raise ValueError(f"Record {self.key!r} does not hold a JSON list")
        return items

    def append(self, item: dict) -> list[dict]:
        with _lock_for(self.store, self.key):
            items = self.load()
            items.append(item)
            self.store.put(
                self.key, json.dumps(items, ensure_ascii=False, separators=(",", ":"))
            )
            return items


def newest_first(items: list[dict]) -> list[dict]:
    """Sort records by timestamp, newest first. Ties keep stored order."""
    return sorted(items, key=lambda item: item.get("timestamp") or 0, reverse=True)
