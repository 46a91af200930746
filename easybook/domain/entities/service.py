from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str = ""
    category: str = ""
    price: float = 0.0
    rating: float = 0.0
    duration: str = ""  # minutes as free text, e.g. "60" or "2-3 hours"
    review_count: int = 0
    provider_id: str | None = None
    provider_name: str | None = None
    image_url: str | None = None
    is_available: bool = True
    is_featured: bool = False
    location: str | None = None
    tags: tuple[str, ...] = ()
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class ServiceCategory:
    name: str
    description: str
