# schemas/category.py

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: str | None = Field(None, max_length=200)
    user_id: str = Field(..., min_length=1)
    is_active: bool = True


class CategoryUpdate(CategoryCreate):
    pass


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str | None
    user_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
