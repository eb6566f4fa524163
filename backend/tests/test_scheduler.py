from contextlib import contextmanager
from datetime import timedelta

from pytest_mock import MockerFixture
from sqlmodel import Session

from app.crud import user_session as session_crud
from app.scheduler import purge_sessions


def test_purge_sessions_removes_only_expired(
    db_session: Session, user_factory, mocker: MockerFixture
) -> None:
    user = user_factory()
    session_crud.create_session(
        session=db_session, user_id=user.id, token="stale", max_age=timedelta(seconds=-1)
    )
    session_crud.create_session(
        session=db_session, user_id=user.id, token="fresh", max_age=timedelta(days=1)
    )

    @contextmanager
    def fake_db_context():
        yield db_session

    mocker.patch("app.api.deps.get_db_context", fake_db_context)

    assert purge_sessions() == 1
    assert session_crud.get_session_by_token(session=db_session, token="stale") is None
    assert session_crud.get_session_by_token(session=db_session, token="fresh") is not None
