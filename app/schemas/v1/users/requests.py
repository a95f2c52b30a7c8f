"""Схемы запросов для управления пользователями."""

from pydantic import EmailStr, Field

from app.schemas import BaseRequestSchema


class UserUpdateSchema(BaseRequestSchema):
    """
    Схема для обновления данных пользователя.

    Attributes:
        email: Новый email (если нужно изменить).
        first_name: Новое имя.
        last_name: Новая фамилия.
        phone_number: Новый телефон.
    """

    email: EmailStr | None = Field(None, description="Новый email")
    first_name: str | None = Field(None, max_length=100, description="Новое имя")
    last_name: str | None = Field(None, max_length=100, description="Новая фамилия")
    phone_number: str | None = Field(None, description="Новый телефон")
