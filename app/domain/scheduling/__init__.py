"""
Scheduling Domain

Slot availability and double-booking prevention for salon appointments.

Structure:
```
app/domain/scheduling/
├── __init__.py
├── schemas.py              # Booking and availability schemas
├── repository.py           # Booking database queries
├── time_calculator.py      # HH:MM arithmetic, slot generation, display status
├── availability_service.py # Free vs. booked slots for a service and date
├── booking_service.py      # Admission (create) and lifecycle (cancel)
└── router.py               # /bookings endpoints
```

INVARIANT:
At most one pending/confirmed booking exists per (service, date, start time).
The booking service checks with a query first; the partial unique index
``uq_bookings_active_slot`` is what actually holds under concurrent inserts,
and its violation is reported as the same "slot already booked" conflict.
Cancelled bookings are kept and no longer occupy their slot.

ENDPOINTS:
- GET  /bookings/available-slots?serviceId=&date= - Free and booked slots (public)
- POST /bookings - Create booking
- GET  /bookings/my-bookings - Current user's bookings
- GET  /bookings - All bookings (admin)
- GET  /bookings/date/{date} - Active bookings on a date (admin)
- GET  /bookings/{booking_id} - Booking detail (owner or admin)
- PUT  /bookings/{booking_id}/cancel - Cancel booking (owner or admin)
"""

from .router import router

__all__ = ["router"]
