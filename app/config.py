import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./salon.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Security - CRITICAL: No default secret key in production
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    import warnings

    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only

JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080"))

# Frontend origins allowed by CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
).split(",")

# Salon operating window (single implicit timezone)
BUSINESS_OPEN_TIME = os.getenv("BUSINESS_OPEN_TIME", "09:00")
BUSINESS_CLOSE_TIME = os.getenv("BUSINESS_CLOSE_TIME", "18:00")
SLOT_INTERVAL_MINUTES = int(os.getenv("SLOT_INTERVAL_MINUTES", "30"))

# "allow" keeps bookings outside the operating window, "reject" refuses them
BOOKING_OVERFLOW_POLICY = os.getenv("BOOKING_OVERFLOW_POLICY", "allow").lower()

_HHMM_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")


def _hhmm_to_minutes(value: str, env_var: str) -> int:
    if not value or not _HHMM_PATTERN.match(value):
        raise ValueError(f"Invalid HH:MM value for {env_var}: {value!r}")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


@dataclass(frozen=True)
class OperatingHours:
    """Daily bookable window expressed in minutes from midnight.

    ``close_minute`` is exclusive: the last slot starts one interval before it.
    """

    open_minute: int
    close_minute: int
    interval_minutes: int

    def __post_init__(self):
        if self.interval_minutes <= 0:
            raise ValueError(f"SLOT_INTERVAL_MINUTES must be > 0, got {self.interval_minutes}")
        if self.open_minute >= self.close_minute:
            raise ValueError("BUSINESS_OPEN_TIME must be earlier than BUSINESS_CLOSE_TIME")
        if self.interval_minutes > self.close_minute - self.open_minute:
            raise ValueError("SLOT_INTERVAL_MINUTES is longer than the operating window")

    @classmethod
    def from_strings(cls, open_time: str, close_time: str, interval_minutes: int) -> "OperatingHours":
        return cls(
            open_minute=_hhmm_to_minutes(open_time, "BUSINESS_OPEN_TIME"),
            close_minute=_hhmm_to_minutes(close_time, "BUSINESS_CLOSE_TIME"),
            interval_minutes=interval_minutes,
        )


if BOOKING_OVERFLOW_POLICY not in ("allow", "reject"):
    raise ValueError(
        f"BOOKING_OVERFLOW_POLICY must be 'allow' or 'reject', got {BOOKING_OVERFLOW_POLICY!r}"
    )

OPERATING_HOURS = OperatingHours.from_strings(
    BUSINESS_OPEN_TIME, BUSINESS_CLOSE_TIME, SLOT_INTERVAL_MINUTES
)
