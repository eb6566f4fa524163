from strawberry.fastapi import BaseContext
from sqlmodel import Session

from app.api.deps import OptionalCurrentUser, SessionDep, SessionTokenDep
from app.exceptions.auth_exceptions import NotAuthenticated
from app.models.user import User


class Context(BaseContext):
    def __init__(
        self,
        *,
        session: Session,
        current_user: User | None,
        session_token: str | None,
    ):
        super().__init__()
        self.session = session
        self.current_user = current_user
        self.session_token = session_token

    @property
    def user(self) -> User:
        if self.current_user is None:
            raise NotAuthenticated()
        return self.current_user


def get_context(
    session: SessionDep,
    current_user: OptionalCurrentUser,
    token: SessionTokenDep,
) -> Context:
    return Context(session=session, current_user=current_user, session_token=token)
