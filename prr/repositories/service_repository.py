"""
Service Repository - PRR Platform
prr/repositories/service_repository.py
"""

from typing import List, Optional, Tuple

from prr.models.catalog import Service
from prr.repositories.base import BaseRepository


class ServiceRepository(BaseRepository[Service]):
    """Repository for reviewed services."""

    ENTITY_NAME = "Service"

    def find_by_name(self, name: str) -> Optional[Service]:
        """Case-insensitive exact match on name."""
        wanted = name.strip().lower()
        with self.locked() as docs:
            for service in docs.values():
                if service.name.lower() == wanted:
                    return service
        return None

    def find_or_create(self, name: str) -> Tuple[Service, bool]:
        """
        Return the service with this name, creating it if needed.

        Returns:
            (service, created)
        """
        with self.locked():
            existing = self.find_by_name(name)
            if existing is not None:
                return existing, False
            return self.insert(Service(name=name.strip())), True

    def search(self, query: str, limit: int = 20) -> List[Service]:
        """Services whose name contains `query` (case-insensitive), sorted by name."""
        needle = query.strip().lower()
        matches = [s for s in self.list_all() if needle in s.name.lower()]
        return matches[:limit]

    def list_all(self) -> List[Service]:
        return sorted(self.all(), key=lambda s: s.name.lower())
