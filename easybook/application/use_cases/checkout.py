from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable

from easybook.application.exceptions import EmptyCartError
from easybook.application.use_cases.booking_ledger import BookingLedger
from easybook.application.use_cases.cart_ledger import CartLedger
from easybook.domain.entities.booking import Address, Booking, BookingStatus
from easybook.domain.entities.service import Service
from easybook.domain.entities.user import User


def timestamp_booking_id(index: int) -> str:
    return f"BK{int(time.time() * 1000)}-{index}"


class CheckoutUseCase:
    """Turn the cart into one pending booking per line item, then take those items out of the cart."""

    def __init__(
        self,
        cart: CartLedger,
        bookings: BookingLedger,
        id_factory: Callable[[int], str] | None = None,
    ) -> None:
        self._cart = cart
        self._bookings = bookings
        self._id_factory = id_factory or timestamp_booking_id
        self._logger = logging.getLogger(__name__)

    def checkout(
        self,
        customer: User,
        address: Address,
        scheduled_at: datetime,
        time_slot: str,
        notes: str = "",
    ) -> list[Booking]:
        items = self._cart.items()
        if not items:
            raise EmptyCartError("Cart is empty")

        created: list[Booking] = []
        for index, service in enumerate(items):
            booking = self._build_booking(index, service, customer, address, scheduled_at, time_slot, notes)
            self._bookings.create(booking)
            created.append(booking)

        self._cart.discard(items)
        self._logger.info(
            "Checkout completed",
            extra={"user_id": customer.id, "booking_id": ",".join(b.id for b in created)},
        )
        return created

    def _build_booking(
        self,
        index: int,
        service: Service,
        customer: User,
        address: Address,
        scheduled_at: datetime,
        time_slot: str,
        notes: str,
    ) -> Booking:
        provider_id = service.provider_id
        provider_name = service.provider_name
        if not provider_id:
            provider = self._bookings.provider_for_category(service.category)
            if provider is not None:
                provider_id = provider.id
                provider_name = provider.full_name

        return Booking(
            id=self._id_factory(index),
            service_id=service.id,
            service_name=service.name,
            service_category=service.category,
            customer_id=customer.id,
            customer_name=customer.full_name,
            customer_email=customer.email,
            customer_phone=customer.phone,
            provider_id=provider_id,
            provider_name=provider_name,
            address=address,
            scheduled_at=scheduled_at,
            time_slot=time_slot,
            status=BookingStatus.PENDING,
            total_amount=service.price,
            notes=notes,
        )
