"""Dependencies для работы с категориями."""

from typing import Annotated

from fastapi import Depends

from app.core.dependencies.cache import CacheServiceDep
from app.core.dependencies.repositories import CategoryRepositoryDep
from app.services.v1 import CategoryService


def get_category_service(repository: CategoryRepositoryDep, cache: CacheServiceDep) -> CategoryService:
    """
    Создает экземпляр CategoryService.

    Returns:
        CategoryService: Сервис категорий
    """
    return CategoryService(repository=repository, cache=cache)


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
