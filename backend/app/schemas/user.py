from datetime import datetime
from uuid import UUID

from app.models.user import UserBase

__all__ = [
    "UserPublic",
]


class UserPublic(UserBase):
    id: UUID
    created_at: datetime
