"""
Схемы API.

Экспортирует общие схемы, схемы health check и схемы каталога.
"""

# Common (из base.py)
from .base import (
    BaseRequestSchema,
    BaseResponseSchema,
    BaseSchema,
    CommonBaseSchema,
    ErrorResponseSchema,
    ErrorSchema,
)
# Health
from .health import (
    HealthCheckDataSchema,
    HealthCheckResponseSchema,
)

# Catalog
from .v1.categories import (
    CategoryCreateSchema,
    CategoryListResponseSchema,
    CategoryResponseSchema,
    CategorySchema,
    CategoryUpdateSchema,
)
from .v1.products import (
    ProductCreateSchema,
    ProductPageResponseSchema,
    ProductPageSchema,
    ProductResponseSchema,
    ProductSchema,
    ProductUpdateSchema,
)
from .v1.users import UserResponseSchema, UserSchema, UserUpdateSchema

__all__ = [
    # Common
    "CommonBaseSchema",
    "BaseSchema",
    "BaseRequestSchema",
    "BaseResponseSchema",
    "ErrorSchema",
    "ErrorResponseSchema",

    # Health
    "HealthCheckDataSchema",
    "HealthCheckResponseSchema",

    # Products
    "ProductSchema",
    "ProductPageSchema",
    "ProductCreateSchema",
    "ProductUpdateSchema",
    "ProductResponseSchema",
    "ProductPageResponseSchema",

    # Categories
    "CategorySchema",
    "CategoryCreateSchema",
    "CategoryUpdateSchema",
    "CategoryResponseSchema",
    "CategoryListResponseSchema",

    # Users
    "UserSchema",
    "UserUpdateSchema",
    "UserResponseSchema",
]
