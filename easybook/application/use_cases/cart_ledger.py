from __future__ import annotations

import logging
from collections import Counter

from easybook.application.ports.record_store import CART_SLOT, RecordStorePort
from easybook.application.utils.documents import decode_list, service_from_document, service_to_document
from easybook.domain.entities.service import Service


class CartLedger:
    """
    Ordered list of services in the cart. There is no quantity: adding the same
    service twice stores two entries, and remove() drops every entry with the id.
    """

    def __init__(self, store: RecordStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def items(self) -> list[Service]:
        return decode_list(self._store.load(CART_SLOT), service_from_document, CART_SLOT)

    def count(self) -> int:
        return len(self.items())

    def total(self) -> float:
        return sum((s.price for s in self.items()), 0.0)

    def add(self, service: Service) -> None:
        def apply(value):
            cart = decode_list(value, service_from_document, CART_SLOT)
            cart.append(service)
            return [service_to_document(s) for s in cart]

        self._store.update(CART_SLOT, apply)
        self._logger.info("Added to cart", extra={"service_id": service.id})

    def remove(self, service_id: str) -> None:
        def apply(value):
            cart = decode_list(value, service_from_document, CART_SLOT)
            return [service_to_document(s) for s in cart if s.id != service_id]

        self._store.update(CART_SLOT, apply)
        self._logger.info("Removed from cart", extra={"service_id": service_id})

    def discard(self, services: list[Service]) -> None:
        """Drop one cart entry per given service, leaving anything added since untouched."""
        pending = Counter(s.id for s in services)

        def apply(value):
            kept: list[Service] = []
            for s in decode_list(value, service_from_document, CART_SLOT):
                if pending[s.id] > 0:
                    pending[s.id] -= 1
                else:
                    kept.append(s)
            return [service_to_document(s) for s in kept]

        self._store.update(CART_SLOT, apply)

    def clear(self) -> None:
        self._store.remove(CART_SLOT)
