"""
Базовые схемы пользователей.

В кеш попадает только публичная часть пользователя: хеш пароля
и refresh-токены в схему не входят.
"""

from pydantic import EmailStr, Field

from app.schemas import BaseSchema


class UserSchema(BaseSchema):
    """
    Пользователь.

    Attributes:
        email: Email адрес для входа в систему
        first_name: Имя
        last_name: Фамилия
        phone_number: Контактный телефон (опционально)
        role: Роль пользователя в системе (admin/user)
        is_email_confirmed: Подтвержден ли email
    """

    email: EmailStr = Field(description="Email адрес", examples=["user@example.com"])
    first_name: str = Field("", description="Имя", examples=["Иван"])
    last_name: str = Field("", description="Фамилия", examples=["Иванов"])
    phone_number: str | None = Field(None, description="Контактный телефон", examples=["+79991234567"])
    role: str = Field("user", description="Роль пользователя (admin или user)", examples=["user", "admin"])
    is_email_confirmed: bool = Field(False, description="Подтвержден ли email")
