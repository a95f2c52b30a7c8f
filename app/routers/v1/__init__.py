"""API v1 роутеры."""

from app.routers.base import BaseRouter
from app.routers.v1.categories import CategoryRouter
from app.routers.v1.products import ProductRouter
from app.routers.v1.users import UserRouter


class APIv1(BaseRouter):
    """
    Агрегатор роутеров для API v1.

    Объединяет роутеры каталога: товары, категории и пользователи.
    """

    def configure(self):
        self.router.include_router(ProductRouter().get_router())
        self.router.include_router(CategoryRouter().get_router())
        self.router.include_router(UserRouter().get_router())


__all__ = ["APIv1"]
