from uuid import uuid4

from fastapi.testclient import TestClient
from sqlmodel import Session

from app.crud import friendship as friendship_crud
from app.crud import user as user_crud
from app.models.user import User
from tests.utils import graphql

ADD_FRIEND = """
mutation addFriend($id: String!) {
  addFriend(id: $id) { id username }
}
"""

REMOVE_FRIEND = """
mutation removeFriend($id: String!) {
  removeFriend(id: $id) { id username }
}
"""

ALL_FRIENDS = "query allFriends { allFriends { id } }"
NO_FRIENDS = "query noFriends { NoFriends { id } }"


def _ids(users: list[dict]) -> set[str]:
    return {user["id"] for user in users}


def test_add_friend_appears_in_both_friend_lists(
    client: TestClient,
    db_session: Session,
    logged_in_user: User,
    user_factory,
) -> None:
    friend = user_factory()

    result = graphql(client, ADD_FRIEND, {"id": str(friend.id)})

    assert "errors" not in result
    assert result["data"]["addFriend"]["id"] == str(friend.id)
    assert [u.id for u in user_crud.get_friends(session=db_session, user_id=logged_in_user.id)] == [friend.id]
    assert [u.id for u in user_crud.get_friends(session=db_session, user_id=friend.id)] == [logged_in_user.id]

    friends = graphql(client, ALL_FRIENDS)
    assert _ids(friends["data"]["allFriends"]) == {str(friend.id)}


def test_add_friend_twice_is_idempotent(
    client: TestClient,
    db_session: Session,
    logged_in_user: User,
    user_factory,
) -> None:
    friend = user_factory()

    graphql(client, ADD_FRIEND, {"id": str(friend.id)})
    result = graphql(client, ADD_FRIEND, {"id": str(friend.id)})

    assert "errors" not in result
    assert friendship_crud.get_friend_ids(
        session=db_session, user_id=logged_in_user.id
    ) == [friend.id]


def test_add_friend_unknown_user(client: TestClient, logged_in_user: User) -> None:
    missing_id = uuid4()

    result = graphql(client, ADD_FRIEND, {"id": str(missing_id)})

    assert result["data"] is None
    assert result["errors"][0]["message"] == "User not found"


def test_add_friend_malformed_id(client: TestClient, logged_in_user: User) -> None:
    result = graphql(client, ADD_FRIEND, {"id": "garbage"})

    assert result["data"] is None
    assert result["errors"][0]["message"] == "User not found"
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_add_self_as_friend(client: TestClient, logged_in_user: User) -> None:
    result = graphql(client, ADD_FRIEND, {"id": str(logged_in_user.id)})

    assert result["data"] is None
    assert result["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"


def test_remove_friend_removes_from_both_lists(
    client: TestClient,
    db_session: Session,
    logged_in_user: User,
    user_factory,
) -> None:
    friend = user_factory()
    friendship_crud.create_friendship(
        session=db_session, user_id=logged_in_user.id, friend_id=friend.id
    )
    db_session.commit()

    result = graphql(client, REMOVE_FRIEND, {"id": str(friend.id)})

    assert "errors" not in result
    assert result["data"]["removeFriend"]["id"] == str(friend.id)
    assert not friendship_crud.are_users_friends(
        session=db_session, user_id=logged_in_user.id, friend_id=friend.id
    )
    assert not friendship_crud.are_users_friends(
        session=db_session, user_id=friend.id, friend_id=logged_in_user.id
    )
    assert graphql(client, ALL_FRIENDS)["data"]["allFriends"] == []


def test_remove_non_friend_is_noop(
    client: TestClient, logged_in_user: User, user_factory
) -> None:
    stranger = user_factory()

    result = graphql(client, REMOVE_FRIEND, {"id": str(stranger.id)})

    assert "errors" not in result
    assert result["data"]["removeFriend"]["id"] == str(stranger.id)


def test_no_friends_excludes_self_and_friends(
    client: TestClient,
    db_session: Session,
    logged_in_user: User,
    user_factory,
) -> None:
    friend = user_factory()
    strangers = [user_factory() for _ in range(2)]
    friendship_crud.create_friendship(
        session=db_session, user_id=logged_in_user.id, friend_id=friend.id
    )
    db_session.commit()

    result = graphql(client, NO_FRIENDS)

    assert "errors" not in result
    assert _ids(result["data"]["NoFriends"]) == {str(user.id) for user in strangers}


def test_friend_queries_require_login(client: TestClient, user_factory) -> None:
    user = user_factory()

    for query, variables in [
        (ALL_FRIENDS, None),
        (NO_FRIENDS, None),
        (ADD_FRIEND, {"id": str(user.id)}),
        (REMOVE_FRIEND, {"id": str(user.id)}),
    ]:
        result = graphql(client, query, variables)

        assert result["data"] is None
        assert result["errors"][0]["message"] == "Not authenticated."
