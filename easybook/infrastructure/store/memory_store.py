from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable

from easybook.application.ports.record_store import RecordStorePort


class MemoryRecordStore(RecordStorePort):
    """Keeps each slot as an encoded JSON string, so values still round-trip through serialization."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, slot: str) -> threading.Lock:
        with self._lock_lock:
            if slot not in self._locks:
                self._locks[slot] = threading.Lock()
            return self._locks[slot]

    def load(self, slot: str) -> Any | None:
        raw = self._slots.get(slot)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            self._logger.warning("Unreadable slot, treating as empty", extra={"slot": slot, "error": str(e)})
            return None

    def save(self, slot: str, value: Any) -> bool:
        with self._get_lock(slot):
            return self._write(slot, value)

    def _write(self, slot: str, value: Any) -> bool:
        try:
            self._slots[slot] = json.dumps(value)
        except (TypeError, ValueError) as e:
            self._logger.error("Slot value is not JSON serializable", extra={"slot": slot, "error": str(e)})
            return False
        return True

    def remove(self, slot: str) -> None:
        with self._get_lock(slot):
            self._slots.pop(slot, None)

    def update(self, slot: str, mutate: Callable[[Any | None], Any]) -> bool:
        with self._get_lock(slot):
            return self._write(slot, mutate(self.load(slot)))
