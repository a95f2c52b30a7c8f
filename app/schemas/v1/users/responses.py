"""Схемы ответов для пользователей."""

from app.schemas import BaseResponseSchema

from .base import UserSchema


class UserResponseSchema(BaseResponseSchema):
    """Схема ответа с одним пользователем."""

    data: UserSchema
