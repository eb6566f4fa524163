from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from app.exceptions.auth_exceptions import NotAuthenticated


class IsAuthenticated(BasePermission):
    message = NotAuthenticated.detail
    error_extensions = {"code": NotAuthenticated.code}

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        return info.context.current_user is not None
