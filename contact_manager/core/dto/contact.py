from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ContactCreateModel(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


class ContactModel(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    message: str = ""
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_timezone(cls, value: datetime) -> datetime:
        # sqlite отдаёт naive datetime
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("message", mode="before")
    @classmethod
    def empty_message(cls, value: str | None) -> str:
        return value or ""


class FieldErrorModel(BaseModel):
    path: str
    msg: str


class ContactResponse(BaseModel):
    success: bool = True
    message: str
    data: ContactModel


class ContactListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[ContactModel]


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: list[FieldErrorModel] | None = None
    error: str | None = None
