from __future__ import annotations

from abc import ABC, abstractmethod

from easybook.domain.entities.service import Service
from easybook.domain.entities.user import User


class ReferenceCatalogPort(ABC):
    @abstractmethod
    def all_services(self) -> list[Service]:
        raise NotImplementedError

    @abstractmethod
    def all_categories(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def providers(self) -> list[User]:
        raise NotImplementedError

    @abstractmethod
    def services_by_category(self, category: str) -> list[Service]:
        """Case-insensitive exact match on category."""
        raise NotImplementedError

    @abstractmethod
    def featured_services(self) -> list[Service]:
        """Services rated 4.5 or higher."""
        raise NotImplementedError

    @abstractmethod
    def search(self, query: str) -> list[Service]:
        """Case-insensitive substring match over name, description or category."""
        raise NotImplementedError

    @abstractmethod
    def describe_category(self, category: str) -> str:
        """Display description for a category name, with a generic fallback."""
        raise NotImplementedError
