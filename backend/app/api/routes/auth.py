from fastapi import APIRouter, Response, status

from app.api.cookies import clear_session_cookie, set_session_cookie
from app.api.deps import SessionDep, SessionTokenDep
from app.models.auth_schemas import LoginRequest, Message
from app.models.user import UserRegister
from app.schemas.user import UserPublic
from app.services import auth as auth_service
from app.services import users as users_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED
)
def register_user(*, session: SessionDep, user_in: UserRegister) -> UserPublic:
    return users_service.register_user(session=session, user_in=user_in)


@router.post("/login", response_model=UserPublic)
def login(
    *,
    session: SessionDep,
    response: Response,
    token: SessionTokenDep,
    login_in: LoginRequest,
) -> UserPublic:
    new_token, user = auth_service.login(
        session=session, login_in=login_in, previous_token=token
    )
    set_session_cookie(response, new_token)
    return user


@router.post("/logout", response_model=Message)
def logout(
    *,
    session: SessionDep,
    response: Response,
    token: SessionTokenDep,
) -> Message:
    auth_service.logout(session=session, token=token)
    clear_session_cookie(response)
    return Message(message="Logged out successfully")
