from uuid import UUID

from sqlmodel import Session, col, or_, select

from app.core.security import get_password_hash, verify_password
from app.models.friendship import Friendship
from app.models.user import User, UserCreate, UserUpdate


def get_user_by_id(*, session: Session, user_id: UUID) -> User | None:
    """
    Get a user by their ID.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    return session.get(User, user_id)


def get_user_by_email(*, session: Session, email: str) -> User | None:
    """
    Get a user by their email address.

    Parameters:
        session (Session): The database session.
        email (str): The email address of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    statement = select(User).where(User.email == email)
    session_user = session.exec(statement).one_or_none()
    return session_user


def get_user_by_username(*, session: Session, username: str) -> User | None:
    """
    Get a user by their username.

    Parameters:
        session (Session): The database session.
        username (str): The username of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    statement = select(User).where(User.username == username)
    return session.exec(statement).one_or_none()


def get_users(*, session: Session) -> list[User]:
    """
    Get every user, oldest account first.

    Parameters:
        session (Session): The database session.
    Returns:
        list[User]: All users.
    """
    stmt = select(User).order_by(col(User.created_at), col(User.username))
    return list(session.exec(stmt).all())


def create_user(
    *,
    session: Session,
    user_create: UserCreate,
) -> User:
    """
    Create a new user in the database.
    Parameters:
        session (Session): The database session.
        user_create (UserCreate): The user creation data.
    Returns:
        User: The created user object.
    Raises:
        IntegrityError: If a user with the same email or username already exists.
    """
    db_obj = User.model_validate(
        user_create, update={"hashed_password": get_password_hash(user_create.password)}
    )
    session.add(db_obj)
    session.flush()  # Check for unique constraints
    return db_obj


def update_user(
    *,
    session: Session,
    db_user: User,
    user_in: UserUpdate,
) -> User:
    """
    Update an existing user in the database.
    Parameters:
        db_user (User): The user object to update.
        user_in (UserUpdate): The user update data.
    Returns:
        User: The updated user object.
    Raises:
        IntegrityError: If a user with the same email or username already exists.
    """
    user_data = user_in.model_dump(exclude_unset=True)
    extra_data = {}
    if "password" in user_data:
        password = user_data.pop("password")
        extra_data["hashed_password"] = get_password_hash(password)
    db_user.sqlmodel_update(user_data, update=extra_data)
    session.add(db_user)
    session.flush()  # Check for unique constraints
    return db_user


def authenticate(*, session: Session, login: str, password: str) -> User | None:
    """
    Authenticate a user by username or email and password.

    Parameters:
        session (Session): The database session.
        login (str): The username or email address of the user.
        password (str): The password of the user.
    Returns:
        User | None: The authenticated user object if credentials are valid, otherwise None.
    """
    stmt = select(User).where(or_(User.username == login, User.email == login))
    db_user = session.exec(stmt).first()
    if not db_user:
        return None
    if not verify_password(password, db_user.hashed_password):
        return None
    return db_user


def get_friends(*, session: Session, user_id: UUID) -> list[User]:
    """
    Get a list of friends for a user.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user whose friends are to be retrieved.
    Returns:
        list[User]: A list of User objects representing the user's friends.
    """
    stmt = (
        select(User)
        .join(
            Friendship,
            col(Friendship.friend_id) == User.id,
        )
        .where(Friendship.user_id == user_id)
        .order_by(col(User.username))
    )
    friends: list[User] = list(session.exec(stmt).all())
    return friends


def get_non_friends(*, session: Session, user_id: UUID) -> list[User]:
    """
    Get every user that is neither the given user nor one of their friends.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user to exclude together with their friends.
    Returns:
        list[User]: A list of User objects that are not befriended with the user.
    """
    friend_ids = select(Friendship.friend_id).where(Friendship.user_id == user_id)
    stmt = (
        select(User)
        .where(
            col(User.id) != user_id,
            col(User.id).not_in(friend_ids),
        )
        .order_by(col(User.username))
    )
    return list(session.exec(stmt).all())
