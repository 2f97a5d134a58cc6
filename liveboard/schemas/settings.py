"""Dropdown settings — request and response bodies."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CategoryItemsUpdate(BaseModel):
    items: list[str]


class CategoryItemCreate(BaseModel):
    item: str = Field(..., min_length=1)


class CategoryRead(BaseModel):
    category: str
    items: list[str]


class CategoryMutationResponse(CategoryRead):
    message: str
    item: str | None = None
