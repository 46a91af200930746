from __future__ import annotations

import logging

from easybook.application.ports.record_store import SERVICES_SLOT, RecordStorePort
from easybook.application.ports.reference_catalog import ReferenceCatalogPort
from easybook.application.utils.documents import decode_list, service_from_document, service_to_document
from easybook.application.utils.service_filters import dedupe_by_id, is_featured, matches_category, matches_query
from easybook.domain.entities.service import Service, ServiceCategory


class ServiceCatalogMerger:
    """
    Union of the reference catalog and admin-created services from the store.

    Reference entries come first and win on id collisions; stored entries follow
    in storage order. Malformed store data degrades to reference-only results.
    """

    def __init__(self, store: RecordStorePort, reference: ReferenceCatalogPort) -> None:
        self._store = store
        self._reference = reference
        self._logger = logging.getLogger(__name__)

    def stored_services(self) -> list[Service]:
        return decode_list(self._store.load(SERVICES_SLOT), service_from_document, SERVICES_SLOT)

    def all_services(self) -> list[Service]:
        return dedupe_by_id(self._reference.all_services() + self.stored_services())

    def get_service(self, service_id: str) -> Service | None:
        for service in self.all_services():
            if service.id == service_id:
                return service
        return None

    def services_by_category(self, category: str) -> list[Service]:
        return [s for s in self.all_services() if matches_category(s, category)]

    def featured_services(self) -> list[Service]:
        return [s for s in self.all_services() if is_featured(s)]

    def all_categories(self) -> list[str]:
        # No stable order
        return list({s.category for s in self.all_services()})

    def service_categories(self) -> list[ServiceCategory]:
        return [
            ServiceCategory(name=name, description=self._reference.describe_category(name))
            for name in self.all_categories()
        ]

    def search(self, query: str = "", category: str = "") -> list[Service]:
        results = []
        for service in self.all_services():
            query_ok = not query or matches_query(service, query)
            category_ok = not category or matches_category(service, category)
            if query_ok and category_ok:
                results.append(service)
        return results

    def save_service(self, service: Service) -> bool:
        """Replace the stored service with the same id, or append it."""

        def apply(value):
            services = decode_list(value, service_from_document, SERVICES_SLOT)
            for index, existing in enumerate(services):
                if existing.id == service.id:
                    services[index] = service
                    break
            else:
                services.append(service)
            return [service_to_document(s) for s in services]

        if not self._store.update(SERVICES_SLOT, apply):
            self._logger.error("Failed to save service", extra={"service_id": service.id})
            return False
        self._logger.info("Service saved", extra={"service_id": service.id})
        return True

    def delete_service(self, service_id: str) -> bool:
        """Remove every stored service with this id. Reference entries are unaffected."""

        def apply(value):
            services = decode_list(value, service_from_document, SERVICES_SLOT)
            return [service_to_document(s) for s in services if s.id != service_id]

        if not self._store.update(SERVICES_SLOT, apply):
            self._logger.error("Failed to delete service", extra={"service_id": service_id})
            return False
        self._logger.info("Service deleted", extra={"service_id": service_id})
        return True
