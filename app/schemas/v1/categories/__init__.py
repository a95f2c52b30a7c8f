from .base import CategorySchema
from .requests import CategoryCreateSchema, CategoryUpdateSchema
from .responses import CategoryListResponseSchema, CategoryResponseSchema

__all__ = [
    "CategorySchema",
    "CategoryCreateSchema",
    "CategoryUpdateSchema",
    "CategoryResponseSchema",
    "CategoryListResponseSchema",
]
