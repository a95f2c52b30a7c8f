"""Схемы ответов для товаров."""

from app.schemas import BaseResponseSchema

from .base import ProductPageSchema, ProductSchema


class ProductResponseSchema(BaseResponseSchema):
    """Схема ответа с одним товаром."""

    data: ProductSchema


class ProductPageResponseSchema(BaseResponseSchema):
    """Схема ответа со страницей товаров."""

    data: ProductPageSchema
