"""Catalog domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models import SERVICE_CATEGORIES

MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 480


def _validate_category(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    normalized = v.strip().lower()
    if normalized not in SERVICE_CATEGORIES:
        raise ValueError(f"category must be one of: {', '.join(SERVICE_CATEGORIES)}")
    return normalized


def _strip_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Service name is required")
    return v


class ServiceCreate(BaseModel):
    """Schema for creating a new service"""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    duration: int = Field(..., ge=MIN_DURATION_MINUTES, le=MAX_DURATION_MINUTES)
    price: float = Field(..., ge=0)
    category: str
    available: bool = True
    imageUrl: Optional[str] = ""

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        return _validate_category(v)


class ServiceUpdate(BaseModel):
    """Schema for updating an existing service"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    duration: Optional[int] = Field(None, ge=MIN_DURATION_MINUTES, le=MAX_DURATION_MINUTES)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    available: Optional[bool] = None
    imageUrl: Optional[str] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _strip_name(v)

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: Optional[str]) -> Optional[str]:
        return _validate_category(v)


class ServiceResponse(BaseModel):
    """Schema for service response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    duration: int
    price: float
    category: str
    available: bool
    imageUrl: Optional[str] = ""
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, service) -> "ServiceResponse":
        return cls(
            id=service.id,
            name=service.name,
            description=service.description,
            duration=service.duration,
            price=service.price,
            category=service.category,
            available=service.available,
            imageUrl=service.image_url or "",
            created_at=service.created_at,
        )
