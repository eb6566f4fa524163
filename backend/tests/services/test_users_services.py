from random import randint
from uuid import uuid4

import pytest
from psycopg.errors import UniqueViolation
from pytest_mock import MockerFixture
from sqlalchemy.exc import IntegrityError

from app.exceptions.user_exceptions import (
    EmailAlreadyExists,
    UsernameAlreadyExists,
    UserNotFound,
)
from app.services import users as users_services


def test_parse_user_id():
    user_id = uuid4()

    assert users_services.parse_user_id(str(user_id)) == user_id
    assert users_services.parse_user_id("not-an-id") is None
    assert users_services.parse_user_id("") is None


def test_parse_user_id_requires_canonical_form():
    user_id = uuid4()

    assert users_services.parse_user_id(str(user_id).upper()) == user_id
    assert users_services.parse_user_id(user_id.hex) is None
    assert users_services.parse_user_id(f"{{{user_id}}}") is None
    assert users_services.parse_user_id(f"urn:uuid:{user_id}") is None


def test_get_user_success(
    mocker: MockerFixture,
):
    mock_crud = mocker.patch("app.crud.user.get_user_by_id")
    mock_converter = mocker.patch("app.converters.user.to_public")
    mock_session = mocker.MagicMock()

    user_id = uuid4()

    users_services.get_user(
        session=mock_session,
        user_id=user_id,
    )

    mock_crud.assert_called_once_with(
        session=mock_session,
        user_id=user_id,
    )
    mock_converter.assert_called_once_with(mock_crud.return_value)


def test_get_user_not_found(
    mocker: MockerFixture,
):
    mock_crud = mocker.patch("app.crud.user.get_user_by_id")
    mock_crud.return_value = None
    mock_session = mocker.MagicMock()

    user_id = uuid4()

    with pytest.raises(UserNotFound):
        users_services.get_user(
            session=mock_session,
            user_id=user_id,
        )


def test_find_user_malformed_id(
    mocker: MockerFixture,
):
    mock_crud = mocker.patch("app.crud.user.get_user_by_id")

    result = users_services.find_user(session=mocker.MagicMock(), raw_id="1234")

    assert result is None
    mock_crud.assert_not_called()


def test_find_user_unknown_id(
    mocker: MockerFixture,
):
    mocker.patch("app.crud.user.get_user_by_id", return_value=None)

    with pytest.raises(UserNotFound) as exc_info:
        users_services.find_user(session=mocker.MagicMock(), raw_id=str(uuid4()))

    assert exc_info.value.detail == "Not Found"


def test_get_users_success(
    mocker: MockerFixture,
):
    len_results = randint(0, 10)
    mock_crud = mocker.patch("app.crud.user.get_users")
    mock_crud.return_value = [mocker.MagicMock() for _ in range(len_results)]
    mock_converter = mocker.patch("app.converters.user.to_public")
    mock_session = mocker.MagicMock()

    result = users_services.get_users(session=mock_session)

    mock_crud.assert_called_once_with(session=mock_session)
    assert mock_converter.call_count == len_results
    assert len(result) == len_results


def test_get_non_friends_success(
    mocker: MockerFixture,
):
    mock_crud = mocker.patch("app.crud.user.get_non_friends")
    mock_crud.return_value = [mocker.MagicMock(), mocker.MagicMock()]
    mock_converter = mocker.patch("app.converters.user.to_public")
    mock_session = mocker.MagicMock()
    user_id = uuid4()

    result = users_services.get_non_friends(session=mock_session, user_id=user_id)

    mock_crud.assert_called_once_with(session=mock_session, user_id=user_id)
    assert mock_converter.call_count == 2
    assert len(result) == 2


def test_register_user_email_taken(
    mocker: MockerFixture,
    user_register_factory,
):
    mocker.patch("app.crud.user.get_user_by_email", return_value=mocker.MagicMock())
    mock_create = mocker.patch("app.crud.user.create_user")

    with pytest.raises(EmailAlreadyExists):
        users_services.register_user(
            session=mocker.MagicMock(), user_in=user_register_factory()
        )

    mock_create.assert_not_called()


def test_register_user_username_taken(
    mocker: MockerFixture,
    user_register_factory,
):
    mocker.patch("app.crud.user.get_user_by_email", return_value=None)
    mocker.patch(
        "app.crud.user.get_user_by_username", return_value=mocker.MagicMock()
    )
    mock_create = mocker.patch("app.crud.user.create_user")

    with pytest.raises(UsernameAlreadyExists):
        users_services.register_user(
            session=mocker.MagicMock(), user_in=user_register_factory()
        )

    mock_create.assert_not_called()


def test_register_user_unique_violation_race(
    mocker: MockerFixture,
    user_register_factory,
):
    mocker.patch("app.crud.user.get_user_by_email", return_value=None)
    mocker.patch("app.crud.user.get_user_by_username", return_value=None)
    mock_create = mocker.patch("app.crud.user.create_user")
    mock_create.side_effect = IntegrityError(
        statement="Integrity error",
        orig=UniqueViolation("Integrity violation"),
        params=None,
    )
    mock_session = mocker.MagicMock()

    with pytest.raises(EmailAlreadyExists):
        users_services.register_user(
            session=mock_session, user_in=user_register_factory()
        )

    mock_session.rollback.assert_called_once()


def test_register_user_success(
    mocker: MockerFixture,
    user_register_factory,
):
    mocker.patch("app.crud.user.get_user_by_email", return_value=None)
    mocker.patch("app.crud.user.get_user_by_username", return_value=None)
    mock_create = mocker.patch("app.crud.user.create_user")
    mock_converter = mocker.patch("app.converters.user.to_public")
    mock_session = mocker.MagicMock()
    user_in = user_register_factory()

    result = users_services.register_user(session=mock_session, user_in=user_in)

    user_create = mock_create.call_args.kwargs["user_create"]
    assert user_create.username == user_in.username
    assert user_create.password == user_in.password
    mock_session.commit.assert_called_once()
    assert result is mock_converter.return_value
