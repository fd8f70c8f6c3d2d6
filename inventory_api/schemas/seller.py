# schemas/seller.py

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime


class SellerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., description="Valid email is required")
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1, max_length=300)
    is_active: bool = True


class SellerUpdate(SellerCreate):
    pass


class SellerResponse(BaseModel):
    id: int
    name: str
    email: EmailStr
    phone: str
    address: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
