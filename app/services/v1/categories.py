"""Сервис категорий каталога."""

import uuid

from app.core.exceptions import EntityNotFoundError
from app.repository.cache import CacheKeys
from app.repository.protocols import CategoryRepository
from app.schemas import CategoryCreateSchema, CategorySchema, CategoryUpdateSchema
from app.services.base import BaseService
from app.services.cache import CacheService
from app.services.invalidation import CacheInvalidator

CategoryList = list[CategorySchema]


class CategoryService(BaseService):
    """
    Сервис категорий.

    Товары хранят название категории, поэтому любое изменение категории
    инвалидирует также закешированные товары и страницы списка товаров.

    Attributes:
        repository (CategoryRepository): Хранилище категорий.
        cache (CacheService): Сервис кеширования.
        invalidator (CacheInvalidator): Инвалидация после фиксации изменений.
    """

    def __init__(self, repository: CategoryRepository, cache: CacheService):
        super().__init__()
        self.repository = repository
        self.cache = cache
        self.invalidator = CacheInvalidator(cache)

    @property
    def ttl(self):
        return self.settings.cache.category_ttl

    def _stale_patterns(self) -> list[str]:
        return [
            CacheKeys.categories_list_pattern(),
            CacheKeys.all_products_pattern(),
            CacheKeys.products_list_pattern(),
        ]

    async def get_category(self, category_id: uuid.UUID) -> CategorySchema:
        category = await self.cache.get_or_set(
            CacheKeys.category_by_id(category_id),
            lambda: self.repository.get_by_id(category_id),
            ttl=self.ttl,
            schema=CategorySchema,
        )
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def list_categories(self) -> list[CategorySchema]:
        """Все категории. Кешируются одним ключом categories:list."""
        return await self.cache.get_or_set(
            CacheKeys.categories_list(),
            self.repository.list_all,
            ttl=self.ttl,
            schema=CategoryList,
        )

    async def create_category(self, data: CategoryCreateSchema) -> CategorySchema:
        category = await self.invalidator.after_commit(
            lambda: self.repository.create(data),
            patterns=[CacheKeys.categories_list_pattern()],
        )
        self.logger.info("Категория создана: %s", category.id)
        return category

    async def update_category(self, category_id: uuid.UUID, data: CategoryUpdateSchema) -> CategorySchema:
        """
        Обновить категорию.

        Raises:
            EntityNotFoundError: Если категория не найдена.
        """
        category = await self.invalidator.after_commit(
            lambda: self.repository.update(category_id, data),
            keys=[CacheKeys.category_by_id(category_id)],
            patterns=self._stale_patterns(),
        )
        if category is None:
            raise EntityNotFoundError("Category", category_id)

        self.logger.info("Категория обновлена: %s", category_id)
        return category

    async def delete_category(self, category_id: uuid.UUID) -> None:
        deleted = await self.invalidator.after_commit(
            lambda: self.repository.delete(category_id),
            keys=[CacheKeys.category_by_id(category_id)],
            patterns=self._stale_patterns(),
        )
        if not deleted:
            raise EntityNotFoundError("Category", category_id)

        self.logger.info("Категория удалена: %s", category_id)
