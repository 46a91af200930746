from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable

from easybook.application.ports.record_store import RecordStorePort


class JsonRecordStore(RecordStorePort):
    """One JSON file per slot, written atomically via temp file + rename."""

    def __init__(self, data_dir: str = "./data/store") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, slot: str) -> threading.Lock:
        """Get or create the writer lock for a slot."""
        with self._lock_lock:
            if slot not in self._locks:
                self._locks[slot] = threading.Lock()
            return self._locks[slot]

    def _get_file_path(self, slot: str) -> Path:
        return self._data_dir / f"{slot}.json"

    def load(self, slot: str) -> Any | None:
        file_path = self._get_file_path(slot)
        if not file_path.exists():
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            # Corrupt slot reads as absent
            self._logger.warning("Unreadable slot, treating as empty", extra={"slot": slot, "error": str(e)})
            return None

    def save(self, slot: str, value: Any) -> bool:
        with self._get_lock(slot):
            return self._write(slot, value)

    def _write(self, slot: str, value: Any) -> bool:
        """Write a slot; caller holds its lock."""
        file_path = self._get_file_path(slot)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            encoded = json.dumps(value, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            self._logger.error("Slot value is not JSON serializable", extra={"slot": slot, "error": str(e)})
            return False

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(encoded)
            # Atomic rename
            temp_path.replace(file_path)
            return True
        except OSError as e:
            self._logger.error("Failed to write slot", extra={"slot": slot, "error": str(e)}, exc_info=True)
            temp_path.unlink(missing_ok=True)
            return False

    def remove(self, slot: str) -> None:
        with self._get_lock(slot):
            self._get_file_path(slot).unlink(missing_ok=True)

    def update(self, slot: str, mutate: Callable[[Any | None], Any]) -> bool:
        with self._get_lock(slot):
            return self._write(slot, mutate(self.load(slot)))
