"""Scheduling repository - Database operations for bookings"""

from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ...models import ACTIVE_BOOKING_STATUSES, Booking

SLOT_INDEX_NAME = "uq_bookings_active_slot"


def is_slot_conflict(error: IntegrityError) -> bool:
    """True when an IntegrityError came from the active-slot unique index"""
    message = str(getattr(error, "orig", error)).lower()
    if SLOT_INDEX_NAME in message:
        return True
    # SQLite names the columns instead of the index
    return "unique constraint failed" in message and "bookings." in message


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def find_bookings(
        db: Session,
        service_id: int,
        booking_date: date,
        statuses: tuple[str, ...] = ACTIVE_BOOKING_STATUSES,
    ) -> list[Booking]:
        """Get bookings for one service on one date with a status in ``statuses``"""
        return (
            db.query(Booking)
            .filter(
                Booking.service_id == service_id,
                Booking.date == booking_date,
                Booking.status.in_(statuses),
            )
            .order_by(Booking.start_time.asc())
            .all()
        )

    @staticmethod
    def find_active_booking(
        db: Session, service_id: int, booking_date: date, start_time: str
    ) -> Optional[Booking]:
        """Get the pending/confirmed booking holding a slot, if any"""
        return (
            db.query(Booking)
            .filter(
                Booking.service_id == service_id,
                Booking.date == booking_date,
                Booking.start_time == start_time,
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            )
            .first()
        )

    @staticmethod
    def insert_booking(db: Session, **booking_data) -> Booking:
        """
        Insert a booking.

        Raises IntegrityError when the active-slot index rejects the row;
        the caller owns the rollback.
        """
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        """Get a booking with its service and customer loaded"""
        return (
            db.query(Booking)
            .options(joinedload(Booking.service), joinedload(Booking.customer))
            .filter(Booking.id == booking_id)
            .first()
        )

    @staticmethod
    def update_booking_status(db: Session, booking: Booking, status: str) -> Booking:
        booking.status = status
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def list_customer_bookings(db: Session, customer_id: int) -> list[Booking]:
        """Get a customer's bookings, newest first"""
        return (
            db.query(Booking)
            .options(joinedload(Booking.service))
            .filter(Booking.customer_id == customer_id)
            .order_by(Booking.date.desc(), Booking.start_time.desc())
            .all()
        )

    @staticmethod
    def list_all_bookings(db: Session) -> list[Booking]:
        return (
            db.query(Booking)
            .options(joinedload(Booking.service), joinedload(Booking.customer))
            .order_by(Booking.date.desc(), Booking.start_time.desc())
            .all()
        )

    @staticmethod
    def list_active_bookings_on_date(db: Session, booking_date: date) -> list[Booking]:
        """Get pending/confirmed bookings across all services for a date"""
        return (
            db.query(Booking)
            .options(joinedload(Booking.service), joinedload(Booking.customer))
            .filter(
                Booking.date == booking_date,
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            )
            .order_by(Booking.start_time.asc())
            .all()
        )
