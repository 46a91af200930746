from __future__ import annotations

import hashlib
import logging
from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import Callable

from easybook.application.exceptions import RescheduleNotAllowedError
from easybook.application.ports.record_store import BOOKINGS_SLOT, RecordStorePort
from easybook.application.ports.reference_catalog import ReferenceCatalogPort
from easybook.application.utils.documents import booking_from_document, booking_to_document, decode_list
from easybook.application.utils.status_rules import RATEABLE_STATUSES, is_backward, is_terminal, parse_status
from easybook.domain.entities.booking import Address, Booking, BookingStatus
from easybook.domain.entities.user import User


def earnings_for(booking: Booking, in_progress_share: float = 0.0) -> float:
    """
    Provider earnings credited for a single booking.
    Completed bookings count in full, in-progress ones at in_progress_share, everything else nothing.
    """
    if booking.status == BookingStatus.COMPLETED:
        return booking.total_amount
    if booking.status == BookingStatus.IN_PROGRESS:
        return booking.total_amount * in_progress_share
    return 0.0


class BookingLedger:
    def __init__(
        self,
        store: RecordStorePort,
        reference: ReferenceCatalogPort,
        in_progress_earnings_share: float = 0.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._reference = reference
        self._in_progress_share = in_progress_earnings_share
        self._clock = clock or datetime.now
        self._logger = logging.getLogger(__name__)

    # Reads

    def all_bookings(self) -> list[Booking]:
        return decode_list(self._store.load(BOOKINGS_SLOT), booking_from_document, BOOKINGS_SLOT)

    def get(self, booking_id: str) -> Booking | None:
        for booking in self.all_bookings():
            if booking.id == booking_id:
                return booking
        return None

    def bookings_for_customer(self, customer_id: str) -> list[Booking]:
        return [b for b in self.all_bookings() if b.customer_id == customer_id]

    def bookings_for_provider(self, provider_id: str) -> list[Booking]:
        return [b for b in self.all_bookings() if b.provider_id is not None and b.provider_id == provider_id]

    # Writes

    def _mutate(self, apply: Callable[[list[Booking]], list[Booking]]) -> bool:
        def mutate(value):
            bookings = decode_list(value, booking_from_document, BOOKINGS_SLOT)
            return [booking_to_document(b) for b in apply(bookings)]

        return self._store.update(BOOKINGS_SLOT, mutate)

    def _mutate_first(self, booking_id: str, change: Callable[[Booking], Booking | None]) -> Booking | None:
        """
        Apply change to the first booking with booking_id and persist the whole collection.
        change returns None to reject the change, or the booking itself to leave it as is.
        Exceptions raised by change abort the write.
        """
        result: list[Booking] = []

        def apply(bookings: list[Booking]) -> list[Booking]:
            for index, booking in enumerate(bookings):
                if booking.id != booking_id:
                    continue
                updated = change(booking)
                if updated is booking:
                    result.append(booking)
                elif updated is not None:
                    bookings[index] = replace(updated, updated_at=self._clock())
                    result.append(bookings[index])
                break
            return bookings

        self._mutate(apply)
        return result[0] if result else None

    def create(self, booking: Booking) -> None:
        """Append a booking. Ids are not checked for uniqueness."""
        self._mutate(lambda bookings: bookings + [booking])
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "status": booking.status.value},
        )

    def set_status(self, booking_id: str, status: str | BookingStatus) -> Booking | None:
        """
        Move the first booking with booking_id to status.
        Unknown ids return None. Bookings in a terminal status keep it, and moves back
        along pending -> confirmed -> in_progress -> completed are refused (None).
        Asking for the current status returns the booking unchanged.
        """
        target = parse_status(status)
        changed: list[bool] = []

        def change(booking: Booking) -> Booking | None:
            if booking.status == target:
                return booking
            if is_terminal(booking.status):
                self._logger.warning(
                    "Ignoring status change on finished booking",
                    extra={"booking_id": booking.id, "status": booking.status.value},
                )
                return None
            if is_backward(booking.status, target):
                self._logger.warning(
                    "Ignoring backward status change",
                    extra={"booking_id": booking.id, "status": booking.status.value},
                )
                return None
            changed.append(True)
            return replace(booking, status=target)

        updated = self._mutate_first(booking_id, change)
        if changed:
            self._logger.info("Booking status updated", extra={"booking_id": booking_id, "status": target.value})
        return updated

    def accept(self, booking_id: str) -> Booking | None:
        return self.set_status(booking_id, BookingStatus.CONFIRMED)

    def decline(self, booking_id: str) -> Booking | None:
        return self.set_status(booking_id, BookingStatus.DECLINED)

    def start(self, booking_id: str) -> Booking | None:
        return self.set_status(booking_id, BookingStatus.IN_PROGRESS)

    def complete(self, booking_id: str) -> Booking | None:
        return self.set_status(booking_id, BookingStatus.COMPLETED)

    def cancel(self, booking_id: str) -> Booking | None:
        return self.set_status(booking_id, BookingStatus.CANCELLED)

    def record_rating(self, booking_id: str, rating: float, comment: str | None = None) -> Booking | None:
        """Store a customer rating. Rating a booking also marks it completed."""

        def change(booking: Booking) -> Booking | None:
            if booking.status not in RATEABLE_STATUSES:
                self._logger.warning(
                    "Rating not allowed in current status",
                    extra={"booking_id": booking.id, "status": booking.status.value},
                )
                return None
            return replace(
                booking,
                rating=rating,
                rating_comment=comment,
                status=BookingStatus.COMPLETED,
            )

        return self._mutate_first(booking_id, change)

    def reschedule(
        self,
        booking_id: str,
        scheduled_at: datetime,
        time_slot: str,
        address: Address | None = None,
    ) -> Booking | None:
        """
        Move a pending booking to a new date/time slot (and optionally address).
        Raises RescheduleNotAllowedError for any other status; unknown ids return None.
        """

        def change(booking: Booking) -> Booking | None:
            if booking.status != BookingStatus.PENDING:
                raise RescheduleNotAllowedError(
                    f"Booking {booking_id} is {booking.status.value}; only pending bookings can be rescheduled"
                )
            return replace(
                booking,
                scheduled_at=scheduled_at,
                time_slot=time_slot,
                address=address or booking.address,
            )

        updated = self._mutate_first(booking_id, change)
        if updated is not None:
            self._logger.info("Booking rescheduled", extra={"booking_id": booking_id})
        return updated

    # Provider assignment

    def provider_for_category(self, category: str) -> User | None:
        """
        Deterministic pick from the reference providers, keyed on the category string.
        Not load-balanced or availability-aware.
        """
        providers = self._reference.providers()
        if not providers:
            return None
        digest = hashlib.sha256(category.encode("utf-8")).digest()
        index = int.from_bytes(digest[:8], "big") % len(providers)
        return providers[index]

    def assign_provider(self, category: str) -> str | None:
        provider = self.provider_for_category(category)
        return provider.id if provider else None

    def create_provider_request(self, booking: Booking) -> Booking:
        """Assign a provider by service category and store the booking as pending."""
        provider = self.provider_for_category(booking.service_category)
        request = replace(
            booking,
            provider_id=provider.id if provider else None,
            provider_name=provider.full_name if provider else None,
            status=BookingStatus.PENDING,
        )
        self.create(request)
        return request

    # Statistics

    def total_bookings(self, customer_id: str) -> int:
        return len(self.bookings_for_customer(customer_id))

    def pending_requests(self, provider_id: str) -> int:
        return sum(1 for b in self.bookings_for_provider(provider_id) if b.status == BookingStatus.PENDING)

    def status_counts(self) -> dict[BookingStatus, int]:
        counts = Counter(b.status for b in self.all_bookings())
        return {status: counts.get(status, 0) for status in BookingStatus}

    def provider_earnings(self, provider_id: str) -> float:
        return sum((earnings_for(b, self._in_progress_share) for b in self.bookings_for_provider(provider_id)), 0.0)

    def total_earnings(self) -> float:
        return sum((earnings_for(b, self._in_progress_share) for b in self.all_bookings()), 0.0)
