from uuid import UUID

from sqlmodel import Field, SQLModel

__all__ = [
    "Friendship",
]


# One row per direction, a friendship between a and b is stored as (a, b) and (b, a)
class Friendship(SQLModel, table=True):
    user_id: UUID = Field(foreign_key="user.id", primary_key=True, ondelete="CASCADE")
    friend_id: UUID = Field(
        foreign_key="user.id", primary_key=True, ondelete="CASCADE", index=True
    )
