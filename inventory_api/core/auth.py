# inventory_api/core/auth.py

import hmac

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from inventory_api.core.config import settings
from inventory_api.core.jwt import (
    PRODUCTS_ACCESS,
    ExpiredSignatureError,
    JWTError,
    decode_access_token,
)
from inventory_api.core.oauth2 import bearer_scheme


def check_products_credentials(username: str, password: str) -> bool:
    username_ok = hmac.compare_digest(username.encode(), settings.PRODUCTS_USERNAME.encode())
    password_ok = hmac.compare_digest(password.encode(), settings.PRODUCTS_PASSWORD.encode())
    return username_ok and password_ok


def get_products_access(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
):
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
        )

    try:
        payload = decode_access_token(credentials.credentials)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )

    # Ensure the token was issued for products access
    if payload.get("access") != PRODUCTS_ACCESS:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token for products access",
        )

    return payload
