# schemas/auth.py

from pydantic import BaseModel, Field


class ProductsLogin(BaseModel):
    username: str = Field(..., min_length=1, description="Username is required")
    password: str = Field(..., min_length=1, description="Password is required")


class ProductsTokenResponse(BaseModel):
    success: bool = True
    message: str
    token: str
    expires_in: str


class TokenInfo(BaseModel):
    username: str
    access: str
    issued_at: int | None = None


class TokenVerifyResponse(BaseModel):
    success: bool = True
    message: str
    data: TokenInfo
