"""Сервисы каталога версии v1."""
from .categories import CategoryService
from .products import ProductService
from .users import UserService

__all__ = [
    "CategoryService",
    "ProductService",
    "UserService",
]
