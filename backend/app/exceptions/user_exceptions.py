from uuid import UUID

from fastapi import status

from .base import AppError


class UserNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    detail = "User not found"

    def __init__(self, user_id: UUID | str, detail: str | None = None):
        self.user_id = user_id
        super().__init__(detail)


class EmailAlreadyExists(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"

    def __init__(self, email: str):
        detail = f"User with email {email} already exists."
        super().__init__(detail)


class UsernameAlreadyExists(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"

    def __init__(self, username: str):
        detail = f"User with username {username} already exists."
        super().__init__(detail)
