"""
Conversion between domain entities and the JSON documents kept in store slots.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, TypeVar

from easybook.application.utils.status_rules import parse_status
from easybook.domain.entities.booking import Address, Booking
from easybook.domain.entities.service import Service
from easybook.domain.entities.user import User

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None


def _text(data: dict[str, Any], key: str, default: str = "") -> str:
    """Read a text field; a null or missing value falls back to default."""
    value = data.get(key)
    return default if value is None else str(value)


def _number(data: dict[str, Any], key: str) -> float:
    return float(data.get(key) or 0.0)


def _format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def booking_to_document(booking: Booking) -> dict[str, Any]:
    return {
        "id": booking.id,
        "service_id": booking.service_id,
        "service_name": booking.service_name,
        "service_category": booking.service_category,
        "customer_id": booking.customer_id,
        "customer_name": booking.customer_name,
        "customer_email": booking.customer_email,
        "customer_phone": booking.customer_phone,
        "provider_id": booking.provider_id,
        "provider_name": booking.provider_name,
        "address": {
            "street": booking.address.street,
            "city": booking.address.city,
            "state": booking.address.state,
            "postal_code": booking.address.postal_code,
        },
        "scheduled_at": _format_datetime(booking.scheduled_at),
        "time_slot": booking.time_slot,
        "status": booking.status.value,
        "total_amount": booking.total_amount,
        "notes": booking.notes,
        "rating": booking.rating,
        "rating_comment": booking.rating_comment,
        "created_at": _format_datetime(booking.created_at),
        "updated_at": _format_datetime(booking.updated_at),
    }


def booking_from_document(data: dict[str, Any]) -> Booking:
    """Raises KeyError/ValueError/TypeError when required fields are missing or invalid."""
    address = data.get("address") or {}
    created_at = _parse_datetime(data.get("created_at")) or datetime.now()
    return Booking(
        id=str(data["id"]),
        service_id=str(data["service_id"]),
        service_name=_text(data, "service_name"),
        service_category=_text(data, "service_category"),
        customer_id=str(data["customer_id"]),
        customer_name=_text(data, "customer_name"),
        customer_email=_text(data, "customer_email"),
        customer_phone=_text(data, "customer_phone"),
        provider_id=data.get("provider_id"),
        provider_name=data.get("provider_name"),
        address=Address(
            street=_text(address, "street"),
            city=_text(address, "city"),
            state=_text(address, "state"),
            postal_code=_text(address, "postal_code"),
        ),
        scheduled_at=_parse_datetime(data.get("scheduled_at")),
        time_slot=_text(data, "time_slot"),
        status=parse_status(data.get("status") or "pending"),
        total_amount=_number(data, "total_amount"),
        notes=_text(data, "notes"),
        rating=_number(data, "rating"),
        rating_comment=data.get("rating_comment"),
        created_at=created_at,
        updated_at=_parse_datetime(data.get("updated_at")) or created_at,
    )


def service_to_document(service: Service) -> dict[str, Any]:
    return {
        "id": service.id,
        "name": service.name,
        "description": service.description,
        "category": service.category,
        "price": service.price,
        "rating": service.rating,
        "duration": service.duration,
        "review_count": service.review_count,
        "provider_id": service.provider_id,
        "provider_name": service.provider_name,
        "image_url": service.image_url,
        "is_available": service.is_available,
        "is_featured": service.is_featured,
        "location": service.location,
        "tags": list(service.tags),
        "created_at": service.created_at,
        "updated_at": service.updated_at,
    }


def service_from_document(data: dict[str, Any]) -> Service:
    return Service(
        id=str(data["id"]),
        name=_text(data, "name"),
        description=_text(data, "description"),
        category=_text(data, "category"),
        price=_number(data, "price"),
        rating=_number(data, "rating"),
        duration=_text(data, "duration"),
        review_count=int(data.get("review_count") or 0),
        provider_id=data.get("provider_id"),
        provider_name=data.get("provider_name"),
        image_url=data.get("image_url"),
        is_available=bool(data.get("is_available", True)),
        is_featured=bool(data.get("is_featured", False)),
        location=data.get("location"),
        tags=tuple(str(tag) for tag in data.get("tags") or ()),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


def user_to_document(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "role": user.role,
        "is_verified": user.is_verified,
        "profile_image": user.profile_image,
        "service_category": user.service_category,
    }


def user_from_document(data: dict[str, Any]) -> User:
    return User(
        id=str(data["id"]),
        first_name=_text(data, "first_name"),
        last_name=_text(data, "last_name"),
        email=_text(data, "email"),
        phone=_text(data, "phone"),
        role=_text(data, "role", "customer"),
        is_verified=bool(data.get("is_verified", False)),
        profile_image=_text(data, "profile_image"),
        service_category=data.get("service_category"),
    )


def decode_list(value: Any, decode: Callable[[dict[str, Any]], T], slot: str) -> list[T]:
    """
    Decode a slot's list of documents.
    Anything that is not a list yields []; individual malformed documents are skipped.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Slot does not hold a list, treating as empty", extra={"slot": slot})
        return []

    items: list[T] = []
    for document in value:
        try:
            items.append(decode(document))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed document", extra={"slot": slot, "error": str(e)})
    return items
