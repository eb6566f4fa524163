import uuid
from datetime import datetime

from pydantic import EmailStr, field_validator
from sqlmodel import DateTime, Field, SQLModel

from app.utils import now_utc, strip_html

__all__ = [
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "UserRegister",
    "User",
]


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    return strip_html(value)


# Shared properties
class UserBase(SQLModel):
    name: str | None = Field(default=None, max_length=255)
    email: EmailStr = Field(unique=True, index=True, max_length=255)
    username: str = Field(unique=True, index=True, min_length=1, max_length=64)
    profile_url: str | None = Field(default=None, max_length=2048)


# Properties to receive via API on creation
class UserCreate(UserBase):
    password: str = Field(min_length=8, max_length=128)


class UserRegister(SQLModel):
    name: str | None = Field(default=None, max_length=255)
    email: EmailStr = Field(max_length=255)
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=8, max_length=128)

    @field_validator("name", "username")
    @classmethod
    def strip_markup(cls, value: str | None) -> str | None:
        cleaned = _clean_text(value)
        if cleaned == "" and value is not None:
            raise ValueError("must contain text")
        return cleaned


# Properties to receive via API on update, all are optional
class UserUpdate(SQLModel):
    name: str | None = Field(default=None, max_length=255)
    email: EmailStr | None = Field(default=None, max_length=255)
    username: str | None = Field(default=None, min_length=1, max_length=64)
    profile_url: str | None = Field(default=None, max_length=2048)
    password: str | None = Field(default=None, min_length=8, max_length=128)


# Database model, database table inferred from class name
class User(UserBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    hashed_password: str
    created_at: datetime = Field(
        default_factory=now_utc, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
