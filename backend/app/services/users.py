from uuid import UUID

from psycopg.errors import UniqueViolation
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.converters import user as user_converters
from app.crud import user as users_crud
from app.exceptions.base import AppError
from app.exceptions.user_exceptions import (
    EmailAlreadyExists,
    UsernameAlreadyExists,
    UserNotFound,
)
from app.models.user import User, UserCreate, UserRegister, UserUpdate
from app.schemas.user import UserPublic


def parse_user_id(raw_id: str) -> UUID | None:
    """
    Parse a client supplied user id.

    Parameters:
        raw_id (str): The id as received from the client.
    Returns:
        UUID | None: The parsed id, or None unless the value is a UUID in its
            canonical hyphenated form.
    """
    try:
        user_id = UUID(raw_id)
    except (TypeError, ValueError, AttributeError):
        return None
    if str(user_id) != raw_id.lower():
        return None
    return user_id


def get_user(
    *,
    session: Session,
    user_id: UUID,
) -> UserPublic:
    """
    Get a user by their ID.

    Parameters:
        session (Session): Database session.
        user_id (UUID): ID of the user to retrieve.
    Returns:
        UserPublic: The public representation of the user.
    Raises:
        UserNotFound: If the user with the given ID does not exist.
    """
    user_db = users_crud.get_user_by_id(session=session, user_id=user_id)
    if not user_db:
        raise UserNotFound(user_id)
    return user_converters.to_public(user_db)


def find_user(
    *,
    session: Session,
    raw_id: str,
) -> UserPublic | None:
    """
    Look up a user by a client supplied id.
    A malformed id yields None, a well formed id without a user is an error.

    Raises:
        UserNotFound: If the id is valid but no such user exists.
    """
    user_id = parse_user_id(raw_id)
    if user_id is None:
        return None
    user_db = users_crud.get_user_by_id(session=session, user_id=user_id)
    if user_db is None:
        raise UserNotFound(user_id, "Not Found")
    return user_converters.to_public(user_db)


def get_users(*, session: Session) -> list[UserPublic]:
    return [
        user_converters.to_public(user_db)
        for user_db in users_crud.get_users(session=session)
    ]


def get_friends(
    *,
    session: Session,
    user_id: UUID,
) -> list[UserPublic]:
    """
    Get the friends of a user.

    Parameters:
        session (Session): Database session.
        user_id (UUID): ID of the user whose friends are to be retrieved.
    Returns:
        list[UserPublic]: List of friends of the user.
    """
    friends = users_crud.get_friends(session=session, user_id=user_id)
    return [user_converters.to_public(friend) for friend in friends]


def get_non_friends(
    *,
    session: Session,
    user_id: UUID,
) -> list[UserPublic]:
    """
    Get the users that are not (yet) friends of a user, excluding the user itself.

    Parameters:
        session (Session): Database session.
        user_id (UUID): ID of the user.
    Returns:
        list[UserPublic]: Users outside of the user's friend list.
    """
    users = users_crud.get_non_friends(session=session, user_id=user_id)
    return [user_converters.to_public(user) for user in users]


def register_user(
    *,
    session: Session,
    user_in: UserRegister,
) -> UserPublic:
    """
    Register a new user.

    Raises:
        EmailAlreadyExists: If the email address is taken.
        UsernameAlreadyExists: If the username is taken.
        AppError: For any other (unexpected) errors.
    """
    if users_crud.get_user_by_email(session=session, email=user_in.email):
        raise EmailAlreadyExists(user_in.email)
    if users_crud.get_user_by_username(session=session, username=user_in.username):
        raise UsernameAlreadyExists(user_in.username)

    user_create = UserCreate.model_validate(user_in)
    try:
        user = users_crud.create_user(session=session, user_create=user_create)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, UniqueViolation):
            if users_crud.get_user_by_username(
                session=session, username=user_in.username
            ):
                raise UsernameAlreadyExists(user_in.username) from e
            raise EmailAlreadyExists(user_in.email) from e
        raise AppError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return user_converters.to_public(user)


def set_profile_url(
    *,
    session: Session,
    user: User,
    profile_url: str,
) -> UserPublic:
    try:
        users_crud.update_user(
            session=session,
            db_user=user,
            user_in=UserUpdate(profile_url=profile_url),
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    return user_converters.to_public(user)
