"""Схемы запросов для товаров."""

import uuid
from decimal import Decimal

from pydantic import Field

from app.schemas import BaseRequestSchema


class ProductCreateSchema(BaseRequestSchema):
    """
    Схема создания товара.

    Attributes:
        name: Название (обязательно).
        description: Описание.
        price: Цена (не меньше 0).
        stock: Остаток (не меньше 0).
        image_url: Ссылка на изображение.
        category_id: UUID существующей категории.
    """

    name: str = Field(min_length=1, max_length=200, description="Название товара")
    description: str = Field("", max_length=2000, description="Описание товара")
    price: Decimal = Field(ge=0, description="Цена")
    stock: int = Field(0, ge=0, description="Остаток на складе")
    image_url: str | None = Field(None, description="Ссылка на изображение")
    category_id: uuid.UUID = Field(description="UUID категории")


class ProductUpdateSchema(BaseRequestSchema):
    """Схема частичного обновления товара: передаются только изменяемые поля."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    price: Decimal | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)
    image_url: str | None = None
    category_id: uuid.UUID | None = None
