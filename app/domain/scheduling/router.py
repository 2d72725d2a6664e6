"""Scheduling router - FastAPI endpoints for availability and bookings"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user, require_admin, resolve_capability
from ...database import get_db
from ...models import User
from .availability_service import AvailabilityService
from .booking_service import BookingService
from .schemas import AvailabilityResponse, BookingCreate, BookingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    """Dependency injection for AvailabilityService"""
    return AvailabilityService(db)


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


# ============================================================================
# AVAILABILITY (public)
# ============================================================================


@router.get("/available-slots")
async def get_available_slots(
    serviceId: Optional[int] = Query(None),
    date: Optional[str] = Query(None),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Available and booked start times for a service on a date"""
    result = service.resolve_availability(serviceId, date)
    return {"success": True, "data": AvailabilityResponse.from_result(result)}


# ============================================================================
# BOOKINGS
# ============================================================================


@router.post("", status_code=201)
async def create_booking(
    data: BookingCreate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Book a slot for the current user"""
    booking = service.create_booking(
        customer_id=current_user.id,
        service_id=data.service,
        date_value=data.date,
        start_time=data.startTime,
        notes=data.notes,
    )
    return {
        "success": True,
        "message": "Booking created successfully",
        "data": BookingResponse.from_model(booking),
    }


@router.get("/my-bookings")
async def get_my_bookings(
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """The current user's bookings, newest first"""
    bookings = service.list_customer_bookings(current_user.id)
    return {
        "success": True,
        "count": len(bookings),
        "data": [BookingResponse.from_model(b) for b in bookings],
    }


@router.get("")
async def get_all_bookings(
    _admin: User = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    """All bookings (administrators only)"""
    bookings = service.list_all_bookings()
    return {
        "success": True,
        "count": len(bookings),
        "data": [BookingResponse.from_model(b) for b in bookings],
    }


@router.get("/date/{booking_date}")
async def get_bookings_by_date(
    booking_date: str,
    _admin: User = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    """Pending and confirmed bookings on a date (administrators only)"""
    target_date, bookings = service.list_bookings_on_date(booking_date)
    return {
        "success": True,
        "count": len(bookings),
        "date": target_date,
        "data": [BookingResponse.from_model(b) for b in bookings],
    }


@router.get("/{booking_id}")
async def get_booking(
    booking_id: int,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """A single booking, visible to its owner and administrators"""
    booking = service.get_booking(booking_id, current_user.id, resolve_capability(current_user))
    return {"success": True, "data": BookingResponse.from_model(booking)}


@router.put("/{booking_id}/cancel")
async def cancel_booking(
    booking_id: int,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Cancel a booking; the slot becomes bookable again"""
    booking = service.cancel_booking(booking_id, current_user.id, resolve_capability(current_user))
    return {
        "success": True,
        "message": "Booking cancelled successfully",
        "data": BookingResponse.from_model(booking),
    }
