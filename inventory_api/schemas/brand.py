# schemas/brand.py

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

WEBSITE_PATTERN = r"^https?://.+"


class BrandCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: str | None = Field(None, max_length=200)
    website: str | None = Field(None, pattern=WEBSITE_PATTERN, description="Please enter a valid URL")
    user_id: str = Field(..., min_length=1)
    is_active: bool = True


class BrandUpdate(BrandCreate):
    pass


class BrandResponse(BaseModel):
    id: int
    name: str
    description: str | None
    website: str | None
    user_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
