from __future__ import annotations

from easybook.domain.entities.service import Service

FEATURED_MIN_RATING = 4.5


def matches_query(service: Service, query: str) -> bool:
    """OR-match: query is a case-insensitive substring of name, description or category."""
    needle = query.lower()
    return (
        needle in service.name.lower()
        or needle in service.description.lower()
        or needle in service.category.lower()
    )


def matches_category(service: Service, category: str) -> bool:
    return service.category.lower() == category.lower()


def is_featured(service: Service) -> bool:
    return service.rating >= FEATURED_MIN_RATING


def dedupe_by_id(services: list[Service]) -> list[Service]:
    """Keep the first occurrence of each id, preserving order."""
    unique: list[Service] = []
    seen_ids: set[str] = set()
    for service in services:
        if service.id not in seen_ids:
            unique.append(service)
            seen_ids.add(service.id)
    return unique
