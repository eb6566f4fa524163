import hashlib
import hmac
import secrets

from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def generate_session_token() -> str:
    """Opaque value handed to the client in the session cookie."""
    return secrets.token_urlsafe(32)


def hash_session_token(token: str) -> str:
    """
    Key under which a session is stored. Only the keyed hash is persisted, so
    rows in the session table cannot be replayed as cookies.
    """
    return hmac.new(
        settings.SESSION_SECRET.encode(),
        token.encode(),
        hashlib.sha256,
    ).hexdigest()
