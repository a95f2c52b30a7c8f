"""
Dependencies для работы с товарами.

Модуль предоставляет dependency injection для ProductService:
- ProductService: чтение товаров через кеш и запись с инвалидацией
"""

from typing import Annotated

from fastapi import Depends

from app.core.dependencies.cache import CacheServiceDep
from app.core.dependencies.repositories import CategoryRepositoryDep, ProductRepositoryDep
from app.services.v1 import ProductService


def get_product_service(
    repository: ProductRepositoryDep,
    categories: CategoryRepositoryDep,
    cache: CacheServiceDep,
) -> ProductService:
    """
    Создает экземпляр ProductService с хранилищами и кешем процесса.

    Args:
        repository: Хранилище товаров
        categories: Хранилище категорий
        cache: Сервис кеширования

    Returns:
        ProductService: Сервис товаров

    Example:
        >>> @router.get("/products/{product_id}")
        >>> async def get_product(product_id: UUID, service: ProductServiceDep):
        ...     return await service.get_product(product_id)
    """
    return ProductService(repository=repository, categories=categories, cache=cache)


# Типизированная зависимость для использования в роутерах
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
