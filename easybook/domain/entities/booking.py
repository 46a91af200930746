from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DECLINED = "declined"  # provider-side rejection


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""


@dataclass(frozen=True)
class Booking:
    id: str
    service_id: str
    service_name: str
    service_category: str
    customer_id: str
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    provider_id: str | None = None
    provider_name: str | None = None
    address: Address = Address()
    scheduled_at: datetime | None = None
    time_slot: str = ""  # free-text label, e.g. "10:00 AM - 12:00 PM"
    status: BookingStatus = BookingStatus.PENDING
    total_amount: float = 0.0  # fixed at booking time, never re-priced from the catalog
    notes: str = ""
    rating: float = 0.0  # 0 when unset
    rating_comment: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
