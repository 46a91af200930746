"""
Concurrent mutations of one slot must not lose updates.
"""

from __future__ import annotations

import tempfile
import threading
from datetime import datetime

from easybook.application.use_cases.booking_ledger import BookingLedger
from easybook.application.use_cases.cart_ledger import CartLedger
from easybook.domain.entities.booking import Booking, BookingStatus
from easybook.domain.entities.service import Service
from easybook.infrastructure.catalog.reference_catalog import ReferenceCatalog
from easybook.infrastructure.store.json_store import JsonRecordStore
from easybook.infrastructure.store.memory_store import MemoryRecordStore


def _run_all(targets) -> None:
    threads = [threading.Thread(target=t) for t in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _booking(booking_id: str) -> Booking:
    return Booking(
        id=booking_id,
        service_id="3",
        service_name="Deep House Cleaning",
        service_category="Cleaning",
        customer_id="cust1",
        provider_id="provider2",
        scheduled_at=datetime(2024, 5, 1, 10, 0),
        total_amount=150.0,
    )


def test_concurrent_creates_are_all_kept():
    with tempfile.TemporaryDirectory() as tmpdir:
        ledger = BookingLedger(JsonRecordStore(data_dir=tmpdir), ReferenceCatalog())

        _run_all([lambda i=i: ledger.create(_booking(f"b{i}")) for i in range(25)])

        assert sorted(b.id for b in ledger.all_bookings()) == sorted(f"b{i}" for i in range(25))


def test_concurrent_status_updates_on_different_bookings():
    ledger = BookingLedger(MemoryRecordStore(), ReferenceCatalog())
    for i in range(20):
        ledger.create(_booking(f"b{i}"))

    _run_all([lambda i=i: ledger.accept(f"b{i}") for i in range(20)])

    assert all(b.status == BookingStatus.CONFIRMED for b in ledger.all_bookings())


def test_concurrent_cart_adds():
    cart = CartLedger(MemoryRecordStore())

    _run_all([lambda i=i: cart.add(Service(id=str(i), name=f"Service {i}")) for i in range(30)])

    assert cart.count() == 30
