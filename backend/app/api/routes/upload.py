from fastapi import APIRouter, UploadFile, status

from app.api.deps import CurrentUser, SessionDep
from app.models.auth_schemas import MediaPublic
from app.schemas.user import UserPublic
from app.services import media as media_service

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/", response_model=MediaPublic, status_code=status.HTTP_201_CREATED)
def upload_media(*, current_user: CurrentUser, file: UploadFile) -> MediaPublic:
    return media_service.store_upload(
        content_type=file.content_type,
        stream=file.file,
    )


@router.post("/profile-picture", response_model=UserPublic)
def upload_profile_picture(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    file: UploadFile,
) -> UserPublic:
    """
    Store an image and use it as the current user's profile picture.
    """
    return media_service.set_profile_picture(
        session=session,
        user=current_user,
        content_type=file.content_type,
        stream=file.file,
    )
