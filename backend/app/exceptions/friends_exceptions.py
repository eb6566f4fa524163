from uuid import UUID

from fastapi import status

from .base import AppError


class CannotBefriendSelfError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_USER_INPUT"

    def __init__(self, user_id: UUID):
        detail = f"User with id {user_id} cannot be friends with themselves."
        super().__init__(detail)
