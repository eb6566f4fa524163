from app.models.user import User
from app.schemas.user import UserPublic


def to_public(user: User) -> UserPublic:
    """
    Converts a User object to its public representation, dropping the
    password hash.

    Parameters:
        user (User): The User object to convert.
    Returns:
        UserPublic: The converted UserPublic object.
    Raises:
        ValidationError: If the user does not match the expected model.
    """
    User.model_validate(user)
    return UserPublic.model_validate(user.model_dump(exclude={"hashed_password"}))
