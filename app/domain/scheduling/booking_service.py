"""Booking service - Admission and lifecycle rules for bookings"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...auth import Capability
from ...config import BOOKING_OVERFLOW_POLICY, OPERATING_HOURS, OperatingHours
from ...models import ACTIVE_BOOKING_STATUSES, Booking
from ...shared.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ...shared.validators import parse_calendar_date, validate_time_string
from ..catalog.repository import CatalogRepository
from .repository import BookingRepository, is_slot_conflict
from .time_calculator import (
    calculate_end_time,
    crosses_midnight,
    ends_after_closing,
    starts_before_opening,
)

logger = logging.getLogger(__name__)

SLOT_TAKEN_MESSAGE = "This time slot is already booked"
MAX_NOTES_LENGTH = 500


class BookingService:
    """Service layer for creating, reading and cancelling bookings"""

    def __init__(
        self,
        db: Session,
        hours: OperatingHours = OPERATING_HOURS,
        overflow_policy: str = BOOKING_OVERFLOW_POLICY,
    ):
        self.db = db
        self.hours = hours
        self.overflow_policy = overflow_policy
        self.repo = BookingRepository()
        self.catalog = CatalogRepository()

    # ------------------------------------------------------------------
    # Admission
    # ------------------------------------------------------------------

    def create_booking(
        self,
        customer_id: int,
        service_id: Optional[int],
        date_value,
        start_time: Optional[str],
        notes: Optional[str] = None,
    ) -> Booking:
        """
        Validate and persist a new confirmed booking.

        The slot is checked twice: a query up front for a friendly error, and
        the active-slot unique index on insert, which decides races between
        concurrent requests. Both surface as the same ConflictError.
        """
        missing = [
            field_name
            for field_name, value in [
                ("service", service_id),
                ("date", date_value),
                ("startTime", start_time),
            ]
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise ValidationError(
                "Service, date, and startTime are required",
                errors=[{"field": f, "message": f"{f} is required"} for f in missing],
            )

        try:
            booking_date = parse_calendar_date(date_value)
        except ValueError as e:
            raise ValidationError.for_field("date", str(e)) from e

        try:
            start_time = validate_time_string(start_time)
        except ValueError as e:
            raise ValidationError.for_field("startTime", str(e)) from e

        if notes and len(notes) > MAX_NOTES_LENGTH:
            raise ValidationError.for_field("notes", "Notes cannot exceed 500 characters")

        service = self.catalog.get_service(self.db, service_id)
        if not service:
            raise NotFoundError("Service not found")

        if crosses_midnight(start_time, service.duration):
            raise ValidationError.for_field("endTime", "Booking cannot run past midnight")

        if self.overflow_policy == "reject":
            if starts_before_opening(start_time, self.hours):
                raise ValidationError.for_field("startTime", "Service would start before opening time")
            if ends_after_closing(start_time, service.duration, self.hours):
                raise ValidationError.for_field("startTime", "Service would end after closing time")

        end_time = calculate_end_time(start_time, service.duration)

        if self.repo.find_active_booking(self.db, service.id, booking_date, start_time):
            logger.warning(
                f"⚠️ Slot conflict for service {service.id} on {booking_date} at {start_time}"
            )
            raise ConflictError(SLOT_TAKEN_MESSAGE)

        try:
            booking = self.repo.insert_booking(
                self.db,
                customer_id=customer_id,
                service_id=service.id,
                date=booking_date,
                start_time=start_time,
                end_time=end_time,
                notes=notes,
                status="confirmed",
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            if isinstance(e, IntegrityError) and is_slot_conflict(e):
                logger.warning(
                    f"⚠️ Lost booking race for service {service.id} on {booking_date} at {start_time}"
                )
                raise ConflictError(SLOT_TAKEN_MESSAGE) from e
            logger.error(f"❌ Failed to insert booking: {e}")
            raise

        logger.info(
            f"✅ Booking created: {booking.id} for customer {customer_id}, "
            f"service {service.id} on {booking_date} {start_time}-{end_time}"
        )
        return self.repo.get_booking(self.db, booking.id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def cancel_booking(
        self,
        booking_id: int,
        requesting_user_id: int,
        capability: Capability = Capability.CUSTOMER,
    ) -> Booking:
        """Move a pending or confirmed booking to cancelled"""
        booking = self.get_booking(booking_id, requesting_user_id, capability, action="cancel")

        if booking.status == "cancelled":
            raise ConflictError("Booking is already cancelled")
        if booking.status not in ACTIVE_BOOKING_STATUSES:
            raise ConflictError(f"Cannot cancel a {booking.status} booking")

        booking = self.repo.update_booking_status(self.db, booking, "cancelled")
        logger.info(f"🚫 Booking cancelled: {booking.id} by user {requesting_user_id}")
        return booking

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_booking(
        self,
        booking_id: int,
        requesting_user_id: int,
        capability: Capability = Capability.CUSTOMER,
        action: str = "view",
    ) -> Booking:
        """Get a booking the requester owns, or any booking for administrators"""
        booking = self.repo.get_booking(self.db, booking_id)
        if not booking:
            raise NotFoundError("Booking not found")

        if booking.customer_id != requesting_user_id and capability is not Capability.ADMINISTRATOR:
            logger.warning(f"⚠️ User {requesting_user_id} may not {action} booking {booking_id}")
            raise ForbiddenError(f"Not authorized to {action} this booking")

        return booking

    def list_customer_bookings(self, customer_id: int) -> list[Booking]:
        return self.repo.list_customer_bookings(self.db, customer_id)

    def list_all_bookings(self) -> list[Booking]:
        return self.repo.list_all_bookings(self.db)

    def list_bookings_on_date(self, date_value) -> tuple[date, list[Booking]]:
        try:
            booking_date = parse_calendar_date(date_value)
        except ValueError as e:
            raise ValidationError.for_field("date", str(e)) from e
        return booking_date, self.repo.list_active_bookings_on_date(self.db, booking_date)
