from datetime import timedelta
from logging import getLogger

from sqlmodel import Session

from app.converters import user as user_converters
from app.core.config import settings
from app.core.security import generate_session_token
from app.crud import user as users_crud
from app.crud import user_session as session_crud
from app.exceptions.auth_exceptions import InvalidCredentials
from app.exceptions.base import AppError
from app.models.auth_schemas import LoginRequest
from app.models.user import User
from app.schemas.user import UserPublic
from app.utils import now_utc

logger = getLogger(__name__)


def login(
    *,
    session: Session,
    login_in: LoginRequest,
    previous_token: str | None = None,
) -> tuple[str, UserPublic]:
    """
    Verify credentials and open a new session.
    A session belonging to previous_token is destroyed first, so a client
    never keeps a pre-login session id.

    Returns:
        tuple[str, UserPublic]: The raw token for the cookie and the logged in user.
    Raises:
        InvalidCredentials: If the login or password is wrong.
        AppError: For any other (unexpected) errors.
    """
    user = users_crud.authenticate(
        session=session, login=login_in.username, password=login_in.password
    )
    if user is None:
        raise InvalidCredentials()

    token = generate_session_token()
    try:
        if previous_token:
            session_crud.delete_session(session=session, token=previous_token)
        session_crud.create_session(
            session=session,
            user_id=user.id,
            token=token,
            max_age=timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS),
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info(f"User {user.id} logged in")
    return token, user_converters.to_public(user)


def logout(*, session: Session, token: str | None) -> bool:
    """
    Destroy the session belonging to token.

    Returns:
        bool: True if a session existed and was removed.
    """
    if not token:
        return False
    try:
        deleted = session_crud.delete_session(session=session, token=token)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    return deleted


def get_user_for_token(*, session: Session, token: str | None) -> User | None:
    """
    Resolve a session cookie to its user.
    Unknown tokens resolve to None. Expired sessions are deleted and resolve to None.
    """
    if not token:
        return None
    user_session = session_crud.get_active_session(
        session=session, token=token, now=now_utc()
    )
    if user_session is None:
        if session_crud.delete_session(session=session, token=token):
            session.commit()
        return None
    return users_crud.get_user_by_id(session=session, user_id=user_session.user_id)


def purge_expired_sessions(*, session: Session) -> int:
    deleted = session_crud.delete_expired_sessions(
        session=session, now=now_utc()
    )
    session.commit()
    if deleted:
        logger.info(f"Purged {deleted} expired sessions")
    return deleted
