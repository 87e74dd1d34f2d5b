from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# #RGB or #RRGGBB; empty string means "use the default color".
COLOR_PATTERN = "^(#[0-9A-Fa-f]{3}|#[0-9A-Fa-f]{6})?$"


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    # Checked by the service so a bad value gets its own error message.
    type: str = ""
    color: str | None = Field(default=None, pattern=COLOR_PATTERN)
    description: str | None = Field(default=None, max_length=200)


class CategoryUpdate(BaseModel):
    """Partial update: omitted, null or empty fields are left unchanged."""

    name: str | None = Field(default=None, max_length=50)
    type: str | None = None
    color: str | None = Field(default=None, pattern=COLOR_PATTERN)
    description: str | None = Field(default=None, max_length=200)


class CategoryOut(BaseModel):
    id: int
    name: str
    type: str
    color: str
    description: str
    created_at: datetime
    updated_at: datetime


class CategoryData(BaseModel):
    data: CategoryOut


class CategoryList(BaseModel):
    data: list[CategoryOut]
    count: int


class MessageOut(BaseModel):
    message: str
