"""
Модуль зависимостей FastAPI.

Содержит зависимости для внедрения в роуты и сервисы приложения.
"""

from .cache import CacheServiceDep, get_cache_service
from .categories import CategoryServiceDep, get_category_service
from .health import HealthServiceDep, get_health_service
from .products import ProductServiceDep, get_product_service
from .repositories import (
    CATEGORY_REPOSITORY,
    PRODUCT_REPOSITORY,
    USER_REPOSITORY,
    CategoryRepositoryDep,
    ProductRepositoryDep,
    UserRepositoryDep,
)
from .users import UserServiceDep, get_user_service

__all__ = [
    # Cache dependencies
    "CacheServiceDep",
    "get_cache_service",
    # Health dependencies
    "HealthServiceDep",
    "get_health_service",
    # Repository dependencies
    "PRODUCT_REPOSITORY",
    "CATEGORY_REPOSITORY",
    "USER_REPOSITORY",
    "ProductRepositoryDep",
    "CategoryRepositoryDep",
    "UserRepositoryDep",
    # Catalog services
    "ProductServiceDep",
    "get_product_service",
    "CategoryServiceDep",
    "get_category_service",
    "UserServiceDep",
    "get_user_service",
]
