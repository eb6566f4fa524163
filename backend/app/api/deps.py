from collections.abc import Generator
from contextlib import contextmanager
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlmodel import Session

from app.core.config import settings
from app.core.db import engine
from app.exceptions.auth_exceptions import NotAuthenticated
from app.models.user import User
from app.services import auth as auth_service

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]
SessionTokenDep = Annotated[str | None, Depends(session_cookie)]


def get_optional_current_user(
    session: SessionDep, token: SessionTokenDep
) -> User | None:
    return auth_service.get_user_for_token(session=session, token=token)


OptionalCurrentUser = Annotated[User | None, Depends(get_optional_current_user)]


def get_current_user(current_user: OptionalCurrentUser) -> User:
    if current_user is None:
        raise NotAuthenticated()
    return current_user


CurrentUser = Annotated[User, Depends(get_current_user)]
