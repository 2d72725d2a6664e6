"""Scheduling domain schemas - Pydantic models for validation"""

from datetime import date as date_type
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..catalog.schemas import ServiceResponse
from .time_calculator import effective_status


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    Presence of service/date/startTime is checked by the booking service so
    that missing fields get the same error shape everywhere. ``endTime`` is
    accepted for older clients and ignored; it is always derived.
    """

    service: Optional[int] = None
    date: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500)


class CustomerSummary(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None


class BookingResponse(BaseModel):
    """Schema for booking response"""

    id: int
    customer: Optional[CustomerSummary] = None
    customerId: int
    service: Optional[ServiceResponse] = None
    serviceId: int
    date: date_type
    startTime: str
    endTime: str
    status: str
    effectiveStatus: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, booking, now: Optional[datetime] = None) -> "BookingResponse":
        customer = None
        if booking.customer is not None:
            customer = CustomerSummary(
                id=booking.customer.id,
                name=booking.customer.name,
                email=booking.customer.email,
                phone=booking.customer.phone,
            )
        return cls(
            id=booking.id,
            customer=customer,
            customerId=booking.customer_id,
            service=ServiceResponse.from_model(booking.service) if booking.service else None,
            serviceId=booking.service_id,
            date=booking.date,
            startTime=booking.start_time,
            endTime=booking.end_time,
            status=booking.status,
            effectiveStatus=effective_status(booking.status, booking.date, booking.end_time, now),
            notes=booking.notes,
            created_at=booking.created_at,
        )


class AvailabilityResponse(BaseModel):
    """Free and booked slots for one service on one date"""

    service: str
    serviceId: int
    date: date_type
    duration: int
    allSlots: list[str]
    availableSlots: list[str]
    bookedSlots: list[str]

    @classmethod
    def from_result(cls, result) -> "AvailabilityResponse":
        return cls(
            service=result.service.name,
            serviceId=result.service.id,
            date=result.date,
            duration=result.service.duration,
            allSlots=result.all_slots,
            availableSlots=result.available_slots,
            bookedSlots=result.booked_slots,
        )
