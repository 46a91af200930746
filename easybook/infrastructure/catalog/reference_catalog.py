from __future__ import annotations

from typing import Callable

from easybook.application.ports.reference_catalog import ReferenceCatalogPort
from easybook.application.utils.service_filters import is_featured, matches_category, matches_query
from easybook.domain.entities.service import Service
from easybook.domain.entities.user import User
from easybook.infrastructure.catalog.reference_data import (
    SEED_CATEGORIES,
    describe_category as describe_seed_category,
    seed_providers,
    seed_services,
)


class ReferenceCatalog(ReferenceCatalogPort):
    """Static seed data. Every call builds a fresh list."""

    def __init__(
        self,
        services_factory: Callable[[], list[Service]] | None = None,
        providers_factory: Callable[[], list[User]] | None = None,
        categories: tuple[str, ...] | None = None,
    ) -> None:
        self._services_factory = services_factory or seed_services
        self._providers_factory = providers_factory or seed_providers
        self._categories = categories if categories is not None else SEED_CATEGORIES

    def all_services(self) -> list[Service]:
        return self._services_factory()

    def all_categories(self) -> list[str]:
        return list(self._categories)

    def providers(self) -> list[User]:
        return self._providers_factory()

    def services_by_category(self, category: str) -> list[Service]:
        return [s for s in self.all_services() if matches_category(s, category)]

    def featured_services(self) -> list[Service]:
        return [s for s in self.all_services() if is_featured(s)]

    def search(self, query: str) -> list[Service]:
        return [s for s in self.all_services() if matches_query(s, query)]

    def describe_category(self, category: str) -> str:
        return describe_seed_category(category)
