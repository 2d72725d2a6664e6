"""Availability service - Free and taken slots for a service on a date"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...config import OPERATING_HOURS, OperatingHours
from ...models import Service
from ...shared.errors import NotFoundError, ValidationError
from ...shared.validators import parse_calendar_date
from ..catalog.repository import CatalogRepository
from .repository import BookingRepository
from .time_calculator import generate_slots

logger = logging.getLogger(__name__)


@dataclass
class Availability:
    """Partition of the day's slots into available and booked"""

    service: Service
    date: date
    all_slots: list[str] = field(default_factory=list)
    available_slots: list[str] = field(default_factory=list)
    booked_slots: list[str] = field(default_factory=list)


class AvailabilityService:
    """Resolves which slots of the operating window are still free"""

    def __init__(self, db: Session, hours: OperatingHours = OPERATING_HOURS):
        self.db = db
        self.hours = hours
        self.bookings = BookingRepository()
        self.catalog = CatalogRepository()

    def resolve_availability(self, service_id: Optional[int], date_value) -> Availability:
        if not service_id or not date_value:
            raise ValidationError("Service ID and date are required")

        try:
            target_date = parse_calendar_date(date_value)
        except ValueError as e:
            raise ValidationError.for_field("date", str(e)) from e

        service = self.catalog.get_service(self.db, service_id)
        if not service:
            raise NotFoundError("Service not found")

        existing = self.bookings.find_bookings(self.db, service.id, target_date)
        taken = {booking.start_time for booking in existing}

        result = Availability(service=service, date=target_date)
        for slot in generate_slots(self.hours):
            result.all_slots.append(slot)
            if slot in taken:
                result.booked_slots.append(slot)
            else:
                result.available_slots.append(slot)

        logger.debug(
            f"Availability for service {service.id} on {target_date}: "
            f"{len(result.available_slots)} free, {len(result.booked_slots)} booked"
        )
        return result
