"""Catalog service - Business logic for the salon service registry"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import SERVICE_CATEGORIES, Service
from ...shared.errors import ConflictError, NotFoundError, ValidationError
from .repository import CatalogRepository
from .schemas import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


class CatalogService:
    """Service layer for the service catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CatalogRepository()

    def list_services(
        self, category: Optional[str] = None, available: Optional[bool] = None
    ) -> list[Service]:
        if category and category.lower() not in SERVICE_CATEGORIES:
            raise ValidationError.for_field(
                "category", f"category must be one of: {', '.join(SERVICE_CATEGORIES)}"
            )
        return self.repo.list_services(
            self.db, category.lower() if category else None, available
        )

    def get_service(self, service_id: int) -> Service:
        """Get a service or raise NotFoundError"""
        service = self.repo.get_service(self.db, service_id)
        if not service:
            raise NotFoundError("Service not found")
        return service

    def create_service(self, data: ServiceCreate) -> Service:
        service = self.repo.create_service(
            self.db,
            name=data.name,
            description=data.description,
            duration=data.duration,
            price=data.price,
            category=data.category,
            available=data.available,
            image_url=data.imageUrl or "",
        )
        logger.info(f"✅ Service created: {service.id} ({service.name})")
        return service

    def update_service(self, service_id: int, data: ServiceUpdate) -> Service:
        service = self.get_service(service_id)

        updates = {
            "name": data.name,
            "description": data.description,
            "duration": data.duration,
            "price": data.price,
            "category": data.category,
            "available": data.available,
            "image_url": data.imageUrl,
        }

        service = self.repo.update_service(self.db, service, **updates)
        logger.info(f"✅ Service updated: {service.id}")
        return service

    def delete_service(self, service_id: int) -> dict:
        """Delete a service that no booking refers to"""
        service = self.get_service(service_id)

        if self.repo.count_bookings_for_service(self.db, service_id):
            logger.warning(f"⚠️ Refused to delete service {service_id}: bookings reference it")
            raise ConflictError(
                "Service has bookings and cannot be deleted. Mark it unavailable instead."
            )

        self.repo.delete_service(self.db, service)
        logger.info(f"🗑️ Service deleted: {service_id}")
        return {"success": True, "message": "Service deleted"}
