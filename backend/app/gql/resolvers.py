import strawberry
from strawberry.types import Info

from app.api.cookies import clear_session_cookie
from app.converters import user as user_converters
from app.exceptions.user_exceptions import UserNotFound
from app.gql.permissions import IsAuthenticated
from app.gql.types import UserType
from app.services import auth as auth_service
from app.services import friends as friends_service
from app.services import users as users_service


@strawberry.type
class Query:
    @strawberry.field
    def users(self, info: Info) -> list[UserType]:
        users = users_service.get_users(session=info.context.session)
        return [UserType.from_public(user) for user in users]

    @strawberry.field
    def user(self, info: Info, id: str) -> UserType | None:
        user = users_service.find_user(session=info.context.session, raw_id=id)
        if user is None:
            return None
        return UserType.from_public(user)

    @strawberry.field
    def me(self, info: Info) -> UserType | None:
        current_user = info.context.current_user
        if current_user is None:
            return None
        return UserType.from_public(user_converters.to_public(current_user))

    @strawberry.field(permission_classes=[IsAuthenticated])
    def all_friends(self, info: Info) -> list[UserType]:
        friends = users_service.get_friends(
            session=info.context.session, user_id=info.context.user.id
        )
        return [UserType.from_public(friend) for friend in friends]

    @strawberry.field(name="NoFriends", permission_classes=[IsAuthenticated])
    def no_friends(self, info: Info) -> list[UserType]:
        users = users_service.get_non_friends(
            session=info.context.session, user_id=info.context.user.id
        )
        return [UserType.from_public(user) for user in users]


@strawberry.type
class Mutation:
    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def add_friend(self, info: Info, id: str) -> UserType:
        friend_id = users_service.parse_user_id(id)
        if friend_id is None:
            raise UserNotFound(id)
        friend = friends_service.add_friend(
            session=info.context.session,
            current_user_id=info.context.user.id,
            friend_id=friend_id,
        )
        return UserType.from_public(friend)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def remove_friend(self, info: Info, id: str) -> UserType:
        friend_id = users_service.parse_user_id(id)
        if friend_id is None:
            raise UserNotFound(id)
        friend = friends_service.remove_friend(
            session=info.context.session,
            current_user_id=info.context.user.id,
            friend_id=friend_id,
        )
        return UserType.from_public(friend)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def logout(self, info: Info) -> bool:
        auth_service.logout(
            session=info.context.session, token=info.context.session_token
        )
        clear_session_cookie(info.context.response)
        return True
