"""
Tests for slot persistence: round-trips, corrupt data and atomic writes.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from easybook.application.ports.record_store import BOOKINGS_SLOT, CART_SLOT, SERVICES_SLOT, USER_SLOT
from easybook.application.use_cases.booking_ledger import BookingLedger
from easybook.application.use_cases.session_holder import SessionHolder
from easybook.application.utils.documents import (
    booking_from_document,
    booking_to_document,
    service_from_document,
    service_to_document,
)
from easybook.domain.entities.booking import Address, Booking, BookingStatus
from easybook.domain.entities.service import Service
from easybook.domain.entities.user import User
from easybook.infrastructure.catalog.reference_catalog import ReferenceCatalog
from easybook.infrastructure.store.json_store import JsonRecordStore
from easybook.infrastructure.store.memory_store import MemoryRecordStore


def _booking() -> Booking:
    return Booking(
        id="1718000000000",
        service_id="3",
        service_name="Deep House Cleaning",
        service_category="Cleaning",
        customer_id="cust1",
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        customer_phone="555-1001",
        provider_id="provider2",
        provider_name="Sarah Johnson",
        address=Address(street="12 High St", city="Leeds", state="West Yorkshire", postal_code="LS1 4AP"),
        scheduled_at=datetime(2024, 5, 1, 10, 0),
        time_slot="10:00 AM - 12:00 PM",
        status=BookingStatus.CONFIRMED,
        total_amount=150.0,
        notes="Ring the side door",
        rating=0.0,
    )


def _service() -> Service:
    return Service(
        id="100",
        name="Garden Tidy",
        description="Hedge trimming and lawn care.",
        category="Gardening",
        price=65.5,
        rating=4.2,
        duration="90",
        review_count=12,
        provider_id="provider4",
        provider_name="Lisa Brown",
        is_featured=True,
        location="Leeds",
        tags=("garden", "outdoor"),
        created_at="2024-04-01T09:00:00",
    )


def test_booking_round_trips_through_json_store():
    """Saving then loading the bookings slot yields an equal booking."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        booking = _booking()

        assert store.save(BOOKINGS_SLOT, [booking_to_document(booking)])

        loaded = [booking_from_document(d) for d in store.load(BOOKINGS_SLOT)]
        assert loaded == [booking]


def test_service_round_trips_through_memory_store():
    store = MemoryRecordStore()
    service = _service()

    assert store.save(CART_SLOT, [service_to_document(service)])

    loaded = [service_from_document(d) for d in store.load(CART_SLOT)]
    assert loaded == [service]
    assert loaded[0].tags == ("garden", "outdoor")


def test_user_round_trips_through_session_holder():
    with tempfile.TemporaryDirectory() as tmpdir:
        session = SessionHolder(JsonRecordStore(data_dir=tmpdir))
        user = User(id="cust1", first_name="Jane", last_name="Doe", email="jane@example.com", is_verified=True)

        session.save(user)

        # A fresh store over the same directory sees the same user
        reopened = SessionHolder(JsonRecordStore(data_dir=tmpdir))
        assert reopened.current() == user


def test_absent_slots_read_as_empty():
    store = MemoryRecordStore()
    assert store.load(BOOKINGS_SLOT) is None
    assert BookingLedger(store, ReferenceCatalog()).all_bookings() == []
    assert SessionHolder(store).current() is None


def test_corrupt_bookings_slot_reads_as_empty():
    """An unparseable bookings file must not raise."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        Path(tmpdir, f"{BOOKINGS_SLOT}.json").write_text("{not json", encoding="utf-8")

        ledger = BookingLedger(store, ReferenceCatalog())
        assert ledger.all_bookings() == []


def test_corrupt_memory_slot_reads_as_empty():
    store = MemoryRecordStore(initial={BOOKINGS_SLOT: "[{broken", USER_SLOT: "null-ish"})
    assert BookingLedger(store, ReferenceCatalog()).all_bookings() == []
    assert SessionHolder(store).current() is None


def test_wrong_shape_reads_as_empty():
    store = MemoryRecordStore()
    store.save(BOOKINGS_SLOT, {"id": "not-a-list"})
    assert BookingLedger(store, ReferenceCatalog()).all_bookings() == []


def test_malformed_documents_are_skipped():
    store = MemoryRecordStore()
    good = booking_to_document(_booking())
    store.save(BOOKINGS_SLOT, [good, {"id": "missing-fields"}, {**good, "id": "2", "status": "archived"}])

    bookings = BookingLedger(store, ReferenceCatalog()).all_bookings()
    assert [b.id for b in bookings] == ["1718000000000"]


def test_booking_with_null_fields_survives_later_writes():
    store = MemoryRecordStore()
    damaged = {
        **booking_to_document(_booking()),
        "total_amount": None,
        "rating": None,
        "status": "Confirmed",
        "notes": None,
        "address": {"street": None, "city": "Leeds"},
    }
    store.save(BOOKINGS_SLOT, [damaged])
    ledger = BookingLedger(store, ReferenceCatalog())

    ledger.create(replace(_booking(), id="new"))

    assert [d["id"] for d in store.load(BOOKINGS_SLOT)] == ["1718000000000", "new"]
    kept = ledger.get("1718000000000")
    assert kept.status == BookingStatus.CONFIRMED
    assert kept.total_amount == 0.0
    assert kept.notes == ""
    assert kept.address == Address(city="Leeds")


def test_user_with_null_fields_still_loads():
    store = MemoryRecordStore()
    store.save(USER_SLOT, {"id": "cust1", "first_name": "Jane", "last_name": None, "role": None})

    user = SessionHolder(store).current()
    assert user.full_name == "Jane"
    assert user.role == "customer"


def test_corrupt_slot_is_replaced_on_next_write():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        Path(tmpdir, f"{BOOKINGS_SLOT}.json").write_text("garbage", encoding="utf-8")
        ledger = BookingLedger(store, ReferenceCatalog())

        ledger.create(_booking())

        assert [b.id for b in ledger.all_bookings()] == ["1718000000000"]


def test_json_store_writes_whole_file_without_leftovers():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        store.save(SERVICES_SLOT, [service_to_document(_service())])

        files = sorted(p.name for p in Path(tmpdir).iterdir())
        assert files == [f"{SERVICES_SLOT}.json"]
        data = json.loads(Path(tmpdir, f"{SERVICES_SLOT}.json").read_text(encoding="utf-8"))
        assert data[0]["id"] == "100"


def test_unserializable_value_is_rejected():
    store = MemoryRecordStore()
    assert store.save(CART_SLOT, [object()]) is False
    assert store.load(CART_SLOT) is None


def test_remove_clears_slot():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        store.save(USER_SLOT, {"id": "cust1"})
        store.remove(USER_SLOT)
        store.remove(USER_SLOT)  # already gone
        assert store.load(USER_SLOT) is None


if __name__ == "__main__":
    test_booking_round_trips_through_json_store()
    test_service_round_trips_through_memory_store()
    test_user_round_trips_through_session_holder()
    test_corrupt_bookings_slot_reads_as_empty()
    print("All tests passed!")
