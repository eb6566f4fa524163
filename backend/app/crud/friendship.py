from uuid import UUID

from sqlmodel import Session, col, or_, select

from app.models.friendship import Friendship


def create_friendship(
    *,
    session: Session,
    user_id: UUID,
    friend_id: UUID,
) -> Friendship:
    """
    Create a two-way friendship between two users.
    Directions that already exist are left untouched, so calling this for an
    existing friendship is a no-op.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user creating the friendship.
        friend_id (UUID): The ID of the user to be added as a friend.
    Returns:
        Friendship: The friendship from user_id to friend_id.
    Raises:
        ForeignKeyViolation: If either user does not exist in the database.
    """
    friendship = session.get(Friendship, (user_id, friend_id))
    if friendship is None:
        friendship = Friendship(user_id=user_id, friend_id=friend_id)
        session.add(friendship)
    if session.get(Friendship, (friend_id, user_id)) is None:
        session.add(Friendship(user_id=friend_id, friend_id=user_id))
    session.flush()
    return friendship


def are_users_friends(
    *,
    session: Session,
    user_id: UUID,
    friend_id: UUID,
) -> bool:
    """
    Check if two users are friends.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the first user.
        friend_id (UUID): The ID of the second user.
    Returns:
        bool: True if the users are friends, False otherwise.
    """
    friendship = session.exec(
        select(Friendship).where(
            Friendship.user_id == user_id,
            Friendship.friend_id == friend_id,
        )
    ).one_or_none()
    return friendship is not None


def get_friend_ids(*, session: Session, user_id: UUID) -> list[UUID]:
    stmt = select(Friendship.friend_id).where(Friendship.user_id == user_id)
    return list(session.exec(stmt).all())


def delete_friendship(
    *,
    session: Session,
    user_id: UUID,
    friend_id: UUID,
) -> int:
    """
    Delete a friendship between two users.
    This will delete both directions of the friendship, including a dangling
    single direction.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user who is deleting the friendship.
        friend_id (UUID): The ID of the user to be removed as a friend.
    Returns:
        int: The number of rows that were deleted (0, 1 or 2).
    """
    rows = session.exec(
        select(Friendship).where(
            or_(
                (col(Friendship.user_id) == user_id)
                & (col(Friendship.friend_id) == friend_id),
                (col(Friendship.user_id) == friend_id)
                & (col(Friendship.friend_id) == user_id),
            )
        )
    ).all()

    for row in rows:
        session.delete(row)
    session.flush()

    return len(rows)
