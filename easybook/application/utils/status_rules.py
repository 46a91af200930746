from __future__ import annotations

from easybook.domain.entities.booking import BookingStatus

TERMINAL_STATUSES = frozenset(
    {
        BookingStatus.COMPLETED,
        BookingStatus.CANCELLED,
        BookingStatus.DECLINED,
    }
)

# pending -> confirmed -> in_progress -> completed, with cancel/decline only while pending.
ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED, BookingStatus.DECLINED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.IN_PROGRESS}),
    BookingStatus.IN_PROGRESS: frozenset({BookingStatus.COMPLETED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.DECLINED: frozenset(),
}

# Position along the happy path; cancel/decline sit outside it.
LIFECYCLE_ORDER: dict[BookingStatus, int] = {
    BookingStatus.PENDING: 0,
    BookingStatus.CONFIRMED: 1,
    BookingStatus.IN_PROGRESS: 2,
    BookingStatus.COMPLETED: 3,
}

RATEABLE_STATUSES = frozenset(
    {
        BookingStatus.CONFIRMED,
        BookingStatus.IN_PROGRESS,
        BookingStatus.COMPLETED,
    }
)


def parse_status(value: str | BookingStatus) -> BookingStatus:
    """Normalize a status string. Raises ValueError for unknown values."""
    if isinstance(value, BookingStatus):
        return value
    return BookingStatus((value or "").strip().lower())


def is_terminal(status: BookingStatus) -> bool:
    return status in TERMINAL_STATUSES


def is_backward(current: BookingStatus, target: BookingStatus) -> bool:
    """True when target sits earlier than current on the pending-to-completed path."""
    if current not in LIFECYCLE_ORDER or target not in LIFECYCLE_ORDER:
        return False
    return LIFECYCLE_ORDER[target] < LIFECYCLE_ORDER[current]


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    """Check a move against the documented booking lifecycle."""
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())
