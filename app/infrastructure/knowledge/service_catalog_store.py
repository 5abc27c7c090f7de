from __future__ import annotations

from app.application.ports.service_catalog import ServiceCatalogPort
from app.domain.entities.service import Service
from app.infrastructure.knowledge.service_catalog_data import SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: tuple[Service, ...] | None = None) -> None:
        self._catalog = catalog or SERVICE_CATALOG
        self._by_id = {service.id: service for service in self._catalog}

    def get_service(self, service_id: str) -> Service | None:
        normalized_id = service_id.lower().strip()
        return self._by_id.get(normalized_id)

    def list_services(self) -> list[Service]:
        return list(self._catalog)
