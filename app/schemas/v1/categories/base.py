"""Базовые схемы категорий."""

from pydantic import Field

from app.schemas import BaseSchema


class CategorySchema(BaseSchema):
    """
    Категория каталога.

    Attributes:
        name: Название категории
        description: Описание
    """

    name: str = Field(description="Название категории", examples=["Электроника"])
    description: str = Field("", description="Описание категории")
