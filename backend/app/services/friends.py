from logging import getLogger
from uuid import UUID

from psycopg.errors import ForeignKeyViolation
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.converters import user as user_converters
from app.crud import friendship as friendship_crud
from app.crud import user as users_crud
from app.exceptions.base import AppError
from app.exceptions.friends_exceptions import CannotBefriendSelfError
from app.exceptions.user_exceptions import UserNotFound
from app.schemas.user import UserPublic

logger = getLogger(__name__)


def add_friend(
    *,
    session: Session,
    current_user_id: UUID,
    friend_id: UUID,
) -> UserPublic:
    """
    Make current_user_id and friend_id friends of each other.
    Both directions are written in the same transaction. Adding an existing
    friend is a no-op.
    Raises:
        CannotBefriendSelfError: If both ids are the same.
        UserNotFound: If the friend does not exist.
        AppError: For any other (unexpected) errors.
    """
    if friend_id == current_user_id:
        raise CannotBefriendSelfError(current_user_id)

    friend = users_crud.get_user_by_id(session=session, user_id=friend_id)
    if friend is None:
        raise UserNotFound(friend_id)

    try:
        friendship_crud.create_friendship(
            session=session,
            user_id=current_user_id,
            friend_id=friend_id,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise UserNotFound(friend_id) from e
        raise AppError from e
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info(f"User {current_user_id} is now friends with {friend_id}")
    return user_converters.to_public(friend)


def remove_friend(
    *,
    session: Session,
    current_user_id: UUID,
    friend_id: UUID,
) -> UserPublic:
    """
    Remove friend_id from current_user_id's friend list and vice versa.
    Removing someone who is not a friend is a no-op.
    Raises:
        UserNotFound: If the friend does not exist.
        AppError: For any other (unexpected) errors.
    """
    friend = users_crud.get_user_by_id(session=session, user_id=friend_id)
    if friend is None:
        raise UserNotFound(friend_id)

    try:
        friendship_crud.delete_friendship(
            session=session,
            user_id=current_user_id,
            friend_id=friend_id,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    logger.info(f"User {current_user_id} removed friend {friend_id}")
    return user_converters.to_public(friend)
