"""Shared test fixtures and helpers."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

from datetime import date  # noqa: E402
from typing import Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.domain.scheduling.time_calculator import calculate_end_time  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Booking, Service, User  # noqa: E402
from app.security_utils import create_access_token  # noqa: E402


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def customer(db):
    return make_user(db, name="Jane Customer", email="jane@example.com")


@pytest.fixture
def other_customer(db):
    return make_user(db, name="Sam Other", email="sam@example.com")


@pytest.fixture
def admin(db):
    return make_user(db, name="Alex Admin", email="admin@example.com", role="admin")


@pytest.fixture
def haircut(db):
    return make_service(db, name="Men's Haircut", duration=45, price=25, category="hair")


def make_user(db, name: str, email: str, role: str = "customer", phone: Optional[str] = None) -> User:
    user = User(name=name, email=email, role=role, phone=phone)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_service(
    db,
    name: str = "Classic Manicure",
    duration: int = 45,
    price: float = 20,
    category: str = "nails",
    available: bool = True,
) -> Service:
    service = Service(
        name=name,
        description=f"{name} description",
        duration=duration,
        price=price,
        category=category,
        available=available,
    )
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


def make_booking(
    db,
    customer: User,
    service: Service,
    booking_date: date = date(2025, 6, 10),
    start_time: str = "09:00",
    end_time: Optional[str] = None,
    status: str = "confirmed",
) -> Booking:
    """Insert a booking row directly, bypassing admission checks."""
    booking = Booking(
        customer_id=customer.id,
        service_id=service.id,
        date=booking_date,
        start_time=start_time,
        end_time=end_time or calculate_end_time(start_time, service.duration),
        status=status,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
