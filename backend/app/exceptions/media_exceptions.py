from fastapi import status

from .base import AppError


class UnsupportedMediaType(AppError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    code = "BAD_USER_INPUT"

    def __init__(self, content_type: str | None):
        detail = f"Unsupported file type {content_type}."
        super().__init__(detail)


class FileTooLarge(AppError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    code = "BAD_USER_INPUT"

    def __init__(self, max_bytes: int):
        detail = f"File exceeds the maximum size of {max_bytes} bytes."
        super().__init__(detail)


class EmptyUpload(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_USER_INPUT"
    detail = "Uploaded file is empty."
