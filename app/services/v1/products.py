"""
Сервис товаров каталога.

Чтение идет через кеш (cache-aside), запись - через хранилище с последующей
инвалидацией ключа товара и всех закешированных страниц списка.
"""

import uuid

from app.core.exceptions import EntityNotFoundError
from app.repository.cache import CacheKeys
from app.repository.protocols import CategoryRepository, ProductRepository
from app.schemas import ProductCreateSchema, ProductPageSchema, ProductSchema, ProductUpdateSchema
from app.services.base import BaseService
from app.services.cache import CacheService
from app.services.invalidation import CacheInvalidator

MAX_PAGE_SIZE = 100


class ProductService(BaseService):
    """
    Сервис товаров.

    Attributes:
        repository (ProductRepository): Хранилище товаров.
        categories (CategoryRepository): Хранилище категорий (проверка при создании).
        cache (CacheService): Сервис кеширования.
        invalidator (CacheInvalidator): Инвалидация после фиксации изменений.

    Example:
        >>> service = ProductService(products, categories, cache)
        >>> product = await service.get_product(product_id)  # MISS -> хранилище
        >>> product = await service.get_product(product_id)  # HIT
    """

    def __init__(
        self,
        repository: ProductRepository,
        categories: CategoryRepository,
        cache: CacheService,
    ):
        super().__init__()
        self.repository = repository
        self.categories = categories
        self.cache = cache
        self.invalidator = CacheInvalidator(cache)

    @property
    def ttl(self):
        return self.settings.cache.product_ttl

    async def get_product(self, product_id: uuid.UUID) -> ProductSchema:
        """
        Получить товар по ID.

        Raises:
            EntityNotFoundError: Если товара нет (отсутствие не кешируется).
        """
        product = await self.cache.get_or_set(
            CacheKeys.product_by_id(product_id),
            lambda: self.repository.get_by_id(product_id),
            ttl=self.ttl,
            schema=ProductSchema,
        )
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def list_products(self, page: int = 1, page_size: int = 10) -> ProductPageSchema:
        """
        Получить страницу товаров.

        Args:
            page (int): Номер страницы, начиная с 1.
            page_size (int): Размер страницы (1..MAX_PAGE_SIZE).

        Raises:
            ValueError: Если параметры пагинации вне допустимых значений.
        """
        if page < 1:
            raise ValueError(f"Номер страницы должен быть >= 1, получено {page}")
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"Размер страницы должен быть от 1 до {MAX_PAGE_SIZE}, получено {page_size}")

        async def load() -> ProductPageSchema:
            items = await self.repository.list_page(offset=(page - 1) * page_size, limit=page_size)
            total = await self.repository.count()
            return ProductPageSchema(items=items, page=page, page_size=page_size, total=total)

        return await self.cache.get_or_set(
            CacheKeys.products_list(page, page_size),
            load,
            ttl=self.ttl,
            schema=ProductPageSchema,
        )

    async def create_product(self, data: ProductCreateSchema) -> ProductSchema:
        """
        Создать товар в существующей категории.

        Raises:
            EntityNotFoundError: Если категория не найдена.
        """
        category = await self.categories.get_by_id(data.category_id)
        if category is None:
            raise EntityNotFoundError("Category", data.category_id)

        product = await self.invalidator.after_commit(
            lambda: self.repository.create(data),
            patterns=[CacheKeys.products_list_pattern()],
        )
        self.logger.info("Товар создан: %s", product.id)

        if product.category_name is None:
            product = product.model_copy(update={"category_name": category.name})
        return product

    async def update_product(self, product_id: uuid.UUID, data: ProductUpdateSchema) -> ProductSchema:
        """
        Обновить товар.

        Raises:
            EntityNotFoundError: Если товар или новая категория не найдены.
        """
        if data.category_id is not None and await self.categories.get_by_id(data.category_id) is None:
            raise EntityNotFoundError("Category", data.category_id)

        product = await self.invalidator.after_commit(
            lambda: self.repository.update(product_id, data),
            keys=[CacheKeys.product_by_id(product_id)],
            patterns=[CacheKeys.products_list_pattern()],
        )
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        self.logger.info("Товар обновлен: %s", product_id)
        return product

    async def delete_product(self, product_id: uuid.UUID) -> None:
        """
        Удалить товар.

        Raises:
            EntityNotFoundError: Если товар не найден.
        """
        deleted = await self.invalidator.after_commit(
            lambda: self.repository.delete(product_id),
            keys=[CacheKeys.product_by_id(product_id)],
            patterns=[CacheKeys.products_list_pattern()],
        )
        if not deleted:
            raise EntityNotFoundError("Product", product_id)

        self.logger.info("Товар удален: %s", product_id)
