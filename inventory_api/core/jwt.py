from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from jose.exceptions import ExpiredSignatureError
from inventory_api.core.config import settings

PRODUCTS_ACCESS = "products"


def create_access_token(username: str, expires_delta: timedelta | None = None):
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    to_encode = {
        "sub": username,
        "access": PRODUCTS_ACCESS,
        "iat": issued_at,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def decode_access_token(token: str):
    """Decode and verify a token.

    Raises ``ExpiredSignatureError`` for expired tokens and ``JWTError`` for
    anything else that fails verification.
    """
    return jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.ALGORITHM]
    )


__all__ = [
    "PRODUCTS_ACCESS",
    "create_access_token",
    "decode_access_token",
    "JWTError",
    "ExpiredSignatureError",
]
