from .base import UserSchema
from .requests import UserUpdateSchema
from .responses import UserResponseSchema

__all__ = [
    "UserSchema",
    "UserUpdateSchema",
    "UserResponseSchema",
]
