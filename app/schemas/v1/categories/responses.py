"""Схемы ответов для категорий."""

from app.schemas import BaseResponseSchema

from .base import CategorySchema


class CategoryResponseSchema(BaseResponseSchema):
    """Схема ответа с одной категорией."""

    data: CategorySchema


class CategoryListResponseSchema(BaseResponseSchema):
    """Схема ответа со списком категорий."""

    data: list[CategorySchema]
