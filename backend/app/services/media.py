from logging import getLogger
from pathlib import Path
from typing import BinaryIO
from uuid import uuid4

from sqlmodel import Session

from app.core.config import settings
from app.exceptions.media_exceptions import (
    EmptyUpload,
    FileTooLarge,
    UnsupportedMediaType,
)
from app.models.auth_schemas import MediaPublic
from app.models.user import User
from app.schemas.user import UserPublic
from app.services import users as users_service

logger = getLogger(__name__)

ALLOWED_CONTENT_TYPES: dict[str, str] = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def store_upload(*, content_type: str | None, stream: BinaryIO) -> MediaPublic:
    """
    Validate an uploaded image and write it to the upload directory.

    Parameters:
        content_type (str | None): The content type reported by the client.
        stream (BinaryIO): The file contents.
    Returns:
        MediaPublic: The stored file name and the url it is served under.
    Raises:
        UnsupportedMediaType: If the content type is not an allowed image type.
        FileTooLarge: If the file exceeds MAX_UPLOAD_BYTES.
        EmptyUpload: If the file has no content.
    """
    suffix = ALLOWED_CONTENT_TYPES.get(content_type or "")
    if suffix is None:
        raise UnsupportedMediaType(content_type)

    data = stream.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise FileTooLarge(settings.MAX_UPLOAD_BYTES)
    if not data:
        raise EmptyUpload()

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    filename = f"{uuid4().hex}{suffix}"
    (upload_dir / filename).write_bytes(data)
    logger.info(f"Stored upload {filename} ({len(data)} bytes)")

    return MediaPublic(
        filename=filename,
        url=f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{filename}",
    )


def set_profile_picture(
    *,
    session: Session,
    user: User,
    content_type: str | None,
    stream: BinaryIO,
) -> UserPublic:
    media = store_upload(content_type=content_type, stream=stream)
    return users_service.set_profile_url(
        session=session, user=user, profile_url=media.url
    )
