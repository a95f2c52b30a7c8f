"""
Роутер для работы с категориями каталога.

Изменение категории сбрасывает и закешированные товары: в них
хранится название категории.
"""

from uuid import UUID

from fastapi import status

from app.core.dependencies import CategoryServiceDep
from app.routers.base import BaseRouter
from app.schemas import (
    BaseResponseSchema,
    CategoryCreateSchema,
    CategoryListResponseSchema,
    CategoryResponseSchema,
    CategoryUpdateSchema,
)


class CategoryRouter(BaseRouter):
    """
    Роутер для API категорий.

    Endpoints:
        GET /categories - Все категории
        GET /categories/{category_id} - Категория по ID
        POST /categories - Создать категорию
        PATCH /categories/{category_id} - Обновить категорию
        DELETE /categories/{category_id} - Удалить категорию
    """

    def __init__(self):
        super().__init__(prefix="categories", tags=["Categories"])

    def configure(self):
        @self.router.get(path="", response_model=CategoryListResponseSchema)
        async def list_categories(service: CategoryServiceDep) -> CategoryListResponseSchema:
            categories = await service.list_categories()
            return CategoryListResponseSchema(message="Категории получены", data=categories)

        @self.router.get(path="/{category_id}", response_model=CategoryResponseSchema)
        async def get_category(category_id: UUID, service: CategoryServiceDep) -> CategoryResponseSchema:
            category = await service.get_category(category_id)
            return CategoryResponseSchema(message="Категория получена", data=category)

        @self.router.post(path="", response_model=CategoryResponseSchema, status_code=status.HTTP_201_CREATED)
        async def create_category(data: CategoryCreateSchema, service: CategoryServiceDep) -> CategoryResponseSchema:
            category = await service.create_category(data)
            return CategoryResponseSchema(message="Категория создана", data=category)

        @self.router.patch(path="/{category_id}", response_model=CategoryResponseSchema)
        async def update_category(
            category_id: UUID,
            data: CategoryUpdateSchema,
            service: CategoryServiceDep,
        ) -> CategoryResponseSchema:
            category = await service.update_category(category_id, data)
            return CategoryResponseSchema(message="Категория обновлена", data=category)

        @self.router.delete(path="/{category_id}", response_model=BaseResponseSchema)
        async def delete_category(category_id: UUID, service: CategoryServiceDep) -> BaseResponseSchema:
            await service.delete_category(category_id)
            return BaseResponseSchema(message="Категория удалена")
