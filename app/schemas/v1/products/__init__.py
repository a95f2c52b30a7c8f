from .base import ProductPageSchema, ProductSchema
from .requests import ProductCreateSchema, ProductUpdateSchema
from .responses import ProductPageResponseSchema, ProductResponseSchema

__all__ = [
    "ProductSchema",
    "ProductPageSchema",
    "ProductCreateSchema",
    "ProductUpdateSchema",
    "ProductResponseSchema",
    "ProductPageResponseSchema",
]
