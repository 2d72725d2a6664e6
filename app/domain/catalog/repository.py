"""Catalog repository - Database operations for salon services"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking, Service


class CatalogRepository:
    """Repository for service catalog database operations"""

    @staticmethod
    def get_service(db: Session, service_id: int) -> Optional[Service]:
        """Get a service by ID, or None if it does not exist"""
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def list_services(
        db: Session,
        category: Optional[str] = None,
        available: Optional[bool] = None,
    ) -> list[Service]:
        """List services with optional category and availability filters"""
        query = db.query(Service)

        if category:
            query = query.filter(Service.category == category)

        if available is not None:
            query = query.filter(Service.available == available)

        return query.order_by(Service.category.asc(), Service.name.asc()).all()

    @staticmethod
    def create_service(db: Session, **service_data) -> Service:
        """Create a new service"""
        service = Service(**service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def update_service(db: Session, service: Service, **updates) -> Service:
        """Update a service with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(service, key):
                setattr(service, key, value)

        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def delete_service(db: Session, service: Service) -> None:
        """Delete a service"""
        db.delete(service)
        db.commit()

    @staticmethod
    def count_bookings_for_service(db: Session, service_id: int) -> int:
        """Count bookings of any status that reference a service"""
        return db.query(Booking).filter(Booking.service_id == service_id).count()
