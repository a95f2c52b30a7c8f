"""Схемы запросов для категорий."""

from pydantic import Field

from app.schemas import BaseRequestSchema


class CategoryCreateSchema(BaseRequestSchema):
    name: str = Field(min_length=1, max_length=100, description="Название категории")
    description: str = Field("", max_length=500, description="Описание категории")


class CategoryUpdateSchema(BaseRequestSchema):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
