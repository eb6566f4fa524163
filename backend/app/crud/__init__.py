from .user import *
from .friendship import (
    are_users_friends,
    create_friendship,
    delete_friendship,
    get_friend_ids,
)
from .user_session import (
    create_session,
    delete_expired_sessions,
    delete_session,
    get_active_session,
    get_session_by_token,
)
