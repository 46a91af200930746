from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

BOOKINGS_SLOT = "bookings"
CART_SLOT = "cart"
SERVICES_SLOT = "services"
USER_SLOT = "user"


class RecordStorePort(ABC):
    @abstractmethod
    def load(self, slot: str) -> Any | None:
        """
        Load the decoded document held in a slot.
        Returns None when the slot is absent or its data cannot be decoded.
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, slot: str, value: Any) -> bool:
        """Replace the whole slot with value. Returns False if the write failed."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, slot: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def update(self, slot: str, mutate: Callable[[Any | None], Any]) -> bool:
        """
        Read-modify-write a slot under its writer lock.
        mutate receives the current value (None if absent or corrupt) and returns the value to save.
        Returns False if the write failed.
        """
        raise NotImplementedError
