# File: src/gympilot/models/schemas.py
"""Pydantic schemas for the gym API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gympilot.core.errors import AppError
from gympilot.core.validators import (
    parse_birth_date,
    validate_notification,
    validate_amount,
    validate_name,
)
from gympilot.models.enums import ForumType, Gender, SessionType


class PersonCreate(BaseModel):
    """Person details shared by client, instructor and secretary requests."""

    name: str = Field(..., max_length=100)
    balance: int = Field(0, ge=0)
    gender: Gender
    birth_date: date | None = Field(
        None, description="yyyy-MM-dd or dd-MM-yyyy; required for clients"
    )

    @field_validator("name")
    @classmethod
    def validate_name_field(cls, v: str) -> str:
        return validate_name(v)

    @field_validator("birth_date", mode="before")
    @classmethod
    def parse_birth_date_field(cls, v: date | str | None) -> date | None:
        """Accept both supported text formats."""
        try:
            return parse_birth_date(v)
        except AppError as e:
            raise ValueError(str(e)) from e


class ClientCreate(PersonCreate):
    """Schema for registering a client."""


class InstructorCreate(PersonCreate):
    """Schema for hiring an instructor."""

    salary: int = Field(..., ge=0, description="Pay per session taught")
    session_types: list[SessionType] = Field(..., min_length=1)

    @field_validator("salary")
    @classmethod
    def validate_salary(cls, v: int) -> int:
        return validate_amount(v, "Salary")


class SecretaryCreate(PersonCreate):
    """Schema for appointing a new secretary."""

    salary: int = Field(..., ge=0, description="Monthly salary")

    @field_validator("salary")
    @classmethod
    def validate_salary(cls, v: int) -> int:
        return validate_amount(v, "Salary")


class SessionCreate(BaseModel):
    """Schema for scheduling a session."""

    session_type: SessionType
    schedule: str = Field(..., description="dd-MM-yyyy HH:mm")
    forum: ForumType = ForumType.OPEN
    instructor_id: int


class EnrollmentCreate(BaseModel):
    client_id: int


class NotificationCreate(BaseModel):
    message: str = Field(..., max_length=1000)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        return validate_notification(v)


class DateNotificationCreate(NotificationCreate):
    date: str = Field(..., description="dd-MM-yyyy")


class ClientRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    gender: Gender
    birth_date: date | None
    balance: int = Field(validation_alias="balance_amount")


class InstructorRead(ClientRead):
    salary: int
    expertise: list[SessionType]


class SecretaryRead(ClientRead):
    salary: int
    active: bool


class SessionRead(BaseModel):
    id: int
    session_type: SessionType
    date_time: datetime
    forum: ForumType
    instructor_id: int
    capacity: int
    price: int
    participant_ids: list[int]


class EnrollmentRead(BaseModel):
    enrolled: bool
    client_balance: int
    gym_balance: int


class NotificationResult(BaseModel):
    delivered: int


class PayrollResult(BaseModel):
    total_paid: int
    gym_balance: int
