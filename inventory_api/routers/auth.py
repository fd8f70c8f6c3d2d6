from fastapi import APIRouter, Depends, HTTPException, status, Request

from inventory_api.core.auth import check_products_credentials, get_products_access
from inventory_api.core.config import settings
from inventory_api.core.jwt import create_access_token
from inventory_api.core.rate_limiter import limiter
from inventory_api.schemas.auth import (
    ProductsLogin,
    ProductsTokenResponse,
    TokenVerifyResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ---------------- PRODUCTS ACCESS TOKEN ----------------
@router.post("/products", response_model=ProductsTokenResponse)
@limiter.limit("5/minute")
def authenticate_products(request: Request, credentials: ProductsLogin):
    username = credentials.username.strip()
    password = credentials.password.strip()

    if not check_products_credentials(username, password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials for products access",
        )

    token = create_access_token(username)

    return {
        "message": "Products authentication successful",
        "token": token,
        "expires_in": f"{settings.ACCESS_TOKEN_EXPIRE_MINUTES}m",
    }


# ---------------- VERIFY TOKEN ----------------
@router.get("/products/verify", response_model=TokenVerifyResponse)
def verify_products_token(payload: dict = Depends(get_products_access)):
    return {
        "message": "Token is valid",
        "data": {
            "username": payload.get("sub"),
            "access": payload.get("access"),
            "issued_at": payload.get("iat"),
        },
    }
