from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import Session, col, select

from app.core.security import hash_session_token
from app.models.user_session import UserSession
from app.utils import now_utc


def create_session(
    *,
    session: Session,
    user_id: UUID,
    token: str,
    max_age: timedelta,
) -> UserSession:
    """
    Store a new login session for a user.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the authenticated user.
        token (str): The raw cookie value, only its hash is stored.
        max_age (timedelta): How long the session stays valid.
    Returns:
        UserSession: The created session row.
    """
    now = now_utc()
    db_obj = UserSession(
        id=hash_session_token(token),
        user_id=user_id,
        created_at=now,
        expires_at=now + max_age,
    )
    session.add(db_obj)
    session.flush()
    return db_obj


def get_session_by_token(*, session: Session, token: str) -> UserSession | None:
    return session.get(UserSession, hash_session_token(token))


def get_active_session(
    *, session: Session, token: str, now: datetime
) -> UserSession | None:
    """
    Get the session belonging to a cookie value if it has not expired yet.
    Expiry is compared in the database.
    """
    stmt = select(UserSession).where(
        UserSession.id == hash_session_token(token),
        col(UserSession.expires_at) > now,
    )
    return session.exec(stmt).one_or_none()


def delete_session(*, session: Session, token: str) -> bool:
    """
    Delete the session belonging to a cookie value.

    Returns:
        bool: True if a session was deleted, False if none existed.
    """
    db_obj = get_session_by_token(session=session, token=token)
    if db_obj is None:
        return False
    session.delete(db_obj)
    session.flush()
    return True


def delete_expired_sessions(*, session: Session, now: datetime) -> int:
    """
    Delete every session that expired at or before now.

    Parameters:
        session (Session): The database session.
        now (datetime): UTC reference time.
    Returns:
        int: The number of deleted sessions.
    """
    result = session.exec(
        delete(UserSession).where(col(UserSession.expires_at) <= now)
    )
    return result.rowcount
