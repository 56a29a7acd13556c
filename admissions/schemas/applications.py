from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

PHONE_PATTERN = r"^010-\d{4}-\d{4}$"


class ApplicationStatus(str, Enum):
    PENDING = "PENDING"
    REVIEWING = "REVIEWING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    WAITLIST = "WAITLIST"


# Query value for "no status filter"
STATUS_FILTER_ALL = "ALL"
StatusFilter = Literal["PENDING", "REVIEWING", "APPROVED", "REJECTED", "WAITLIST", "ALL"]

Gender = Literal["남", "여"]
Golf = Literal["Yes", "No"]
TaxInvoice = Literal["발행", "미발행"]


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApplicationCreate(CamelModel):
    """Schema for submitting a new application"""

    name: str = Field(..., min_length=1, max_length=50)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    birth_date: Optional[str] = None
    gender: Optional[Gender] = None
    company_position: str = Field(..., min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=300)
    interests: list[str] = Field(..., min_length=1, max_length=10)
    golf: Golf
    referrer: Optional[str] = Field(None, max_length=100)
    tax_invoice: TaxInvoice
    generation: int = Field(..., ge=1, le=100)

    @field_validator("generation", mode="before")
    @classmethod
    def require_number(cls, v):
        """Accept JSON numbers with an integral value (3 or 3.0); reject strings and booleans"""
        if isinstance(v, (bool, str)):
            raise ValueError("generation must be a number")
        return v


class ApplicationUpdate(CamelModel):
    """Schema for a review decision on an application"""

    status: ApplicationStatus
    admin_notes: Optional[str] = None
    reviewed_by: Optional[str] = None


class Application(CamelModel):
    """Full application record"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone: str
    birth_date: Optional[str] = None
    gender: Optional[str] = None
    company_position: str
    address: Optional[str] = None
    interests: list[str]
    golf: str
    referrer: Optional[str] = None
    tax_invoice: str
    generation: int
    status: ApplicationStatus = ApplicationStatus.PENDING
    admin_notes: Optional[str] = None
    reviewer: Optional[str] = None
    submitted_at: datetime
    reviewed_at: Optional[datetime] = None

    @field_validator("submitted_at", "reviewed_at")
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """SQLite drops tzinfo; stored timestamps are always UTC"""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ApplicationSummary(CamelModel):
    id: str
    name: str
    generation: int
    status: ApplicationStatus


class ApplicationCreated(BaseModel):
    message: str
    application: ApplicationSummary


class ApplicationUpdated(BaseModel):
    message: str
    application: Application


class MessageResponse(BaseModel):
    message: str


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ApplicationList(BaseModel):
    """Page of applications with pagination metadata"""

    applications: list[Application]
    pagination: Pagination
