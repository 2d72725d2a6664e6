"""Catalog router - FastAPI endpoints for salon services"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...models import User
from .schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from .service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/services", tags=["Services"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(db)


# ============================================================================
# PUBLIC
# ============================================================================


@router.get("")
async def list_services(
    category: Optional[str] = Query(None),
    available: Optional[bool] = Query(None),
    service: CatalogService = Depends(get_catalog_service),
):
    """List services, optionally filtered by category and availability"""
    services = service.list_services(category, available)
    return {
        "success": True,
        "count": len(services),
        "data": [ServiceResponse.from_model(s) for s in services],
    }


@router.get("/{service_id}")
async def get_service(
    service_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    """Get a single service"""
    return {"success": True, "data": ServiceResponse.from_model(service.get_service(service_id))}


# ============================================================================
# ADMINISTRATOR
# ============================================================================


@router.post("", status_code=201)
async def create_service(
    data: ServiceCreate,
    _admin: User = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    """Create a new service"""
    created = service.create_service(data)
    return {
        "success": True,
        "message": "Service created successfully",
        "data": ServiceResponse.from_model(created),
    }


@router.put("/{service_id}")
async def update_service(
    service_id: int,
    data: ServiceUpdate,
    _admin: User = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    """Update a service"""
    updated = service.update_service(service_id, data)
    return {
        "success": True,
        "message": "Service updated successfully",
        "data": ServiceResponse.from_model(updated),
    }


@router.delete("/{service_id}")
async def delete_service(
    service_id: int,
    _admin: User = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    """Delete a service with no bookings"""
    return service.delete_service(service_id)
