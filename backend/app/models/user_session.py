from datetime import datetime
from uuid import UUID

from sqlmodel import DateTime, Field, SQLModel

from app.utils import now_utc

__all__ = [
    "UserSession",
]


class UserSession(SQLModel, table=True):
    # Keyed hash of the cookie value, never the raw token
    id: str = Field(primary_key=True, max_length=64)
    user_id: UUID = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(
        default_factory=now_utc, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
    expires_at: datetime = Field(
        index=True, sa_type=DateTime(timezone=True)  # type: ignore[call-overload]
    )
