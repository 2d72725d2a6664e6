from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base

SERVICE_CATEGORIES = ("hair", "nails", "skin", "massage", "other")

USER_ROLES = ("customer", "admin")

BOOKING_STATUSES = ("pending", "confirmed", "cancelled", "completed")
# Statuses that occupy a (service, date, start_time) slot
ACTIVE_BOOKING_STATUSES = ("pending", "confirmed")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=True)
    role = Column(String(20), default="customer", nullable=False)  # customer, admin
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    bookings = relationship("Booking", back_populates="customer")


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes, 5-480
    price = Column(Float, nullable=False)
    category = Column(String(20), nullable=False)  # hair, nails, skin, massage, other
    available = Column(Boolean, default=True, nullable=False)
    image_url = Column(String(500), default="", nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    bookings = relationship("Booking", back_populates="service")

    __table_args__ = (Index("ix_services_category_available", "category", "available"),)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False)
    date = Column(Date, nullable=False)
    start_time = Column(String(5), nullable=False)  # HH:MM format
    end_time = Column(String(5), nullable=False)  # start_time + service.duration
    status = Column(String(20), default="confirmed", nullable=False)
    notes = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("User", back_populates="bookings")
    service = relationship("Service", back_populates="bookings")

    # At most one pending/confirmed booking per slot; cancelled rows keep history
    __table_args__ = (
        Index(
            "uq_bookings_active_slot",
            "date",
            "start_time",
            "service_id",
            unique=True,
            sqlite_where=text("status IN ('pending', 'confirmed')"),
            postgresql_where=text("status IN ('pending', 'confirmed')"),
        ),
    )
