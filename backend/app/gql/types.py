from uuid import UUID

import strawberry
from strawberry.types import Info

from app.schemas.user import UserPublic
from app.services import users as users_service


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str | None
    email: str
    username: str
    profile_url: str | None

    @strawberry.field
    def friends(self, info: Info) -> list["UserType"]:
        friends = users_service.get_friends(
            session=info.context.session, user_id=UUID(self.id)
        )
        return [UserType.from_public(friend) for friend in friends]

    @classmethod
    def from_public(cls, user: UserPublic) -> "UserType":
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            email=user.email,
            username=user.username,
            profile_url=user.profile_url,
        )
