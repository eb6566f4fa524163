from .user import *
from .friendship import Friendship
from .user_session import UserSession
from .auth_schemas import *

User.model_rebuild()

__all__ = [
    "User",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "UserRegister",
    "Friendship",
    "UserSession",
    "LoginRequest",
    "Message",
    "MediaPublic",
]
