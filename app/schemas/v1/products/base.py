"""
Базовые схемы товаров.

ProductSchema хранится в кеше под ключом product:id:{id}
и внутри страниц списка products:list:page:{page}:size:{size}.
"""

import uuid
from decimal import Decimal

from pydantic import Field

from app.schemas import BaseSchema, CommonBaseSchema


class ProductSchema(BaseSchema):
    """
    Товар каталога.

    Attributes:
        name: Название товара
        description: Описание
        price: Цена
        stock: Остаток на складе
        image_url: Ссылка на изображение (опционально)
        category_id: UUID категории
        category_name: Название категории (денормализовано для ответа)
    """

    name: str = Field(description="Название товара", examples=["Ноутбук"])
    description: str = Field("", description="Описание товара")
    price: Decimal = Field(ge=0, description="Цена", examples=["999.99"])
    stock: int = Field(0, ge=0, description="Остаток на складе")
    image_url: str | None = Field(None, description="Ссылка на изображение")
    category_id: uuid.UUID = Field(description="UUID категории")
    category_name: str | None = Field(None, description="Название категории")


class ProductPageSchema(CommonBaseSchema):
    """
    Страница списка товаров.

    Attributes:
        items: Товары на странице
        page: Номер страницы (с 1)
        page_size: Размер страницы
        total: Общее количество товаров
    """

    items: list[ProductSchema]
    page: int
    page_size: int
    total: int
