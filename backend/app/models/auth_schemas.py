from sqlmodel import Field, SQLModel

__all__ = [
    "LoginRequest",
    "Message",
    "MediaPublic",
]


class LoginRequest(SQLModel):
    # Either the username or the email address
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)


# Generic message
class Message(SQLModel):
    message: str


class MediaPublic(SQLModel):
    filename: str
    url: str
