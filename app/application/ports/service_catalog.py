from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.service import Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[Service]:
        """All services in catalog order."""
        raise NotImplementedError
