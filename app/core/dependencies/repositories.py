"""
Зависимости для репозиториев каталога.

Хранилище находится вне этого сервиса: слой хранения при старте
регистрирует свои репозитории в app.state под именами ниже.

    app.state.product_repository
    app.state.category_repository
    app.state.user_repository
"""

import logging
from typing import Annotated, Any

from fastapi import Depends, Request

from app.core.exceptions import ServiceUnavailableError
from app.repository.protocols import CategoryRepository, ProductRepository, UserRepository

logger = logging.getLogger(__name__)

PRODUCT_REPOSITORY = "product_repository"
CATEGORY_REPOSITORY = "category_repository"
USER_REPOSITORY = "user_repository"


def _get_repository(request: Request, name: str) -> Any:
    repository = getattr(request.app.state, name, None)
    if repository is None:
        logger.error("Репозиторий '%s' не зарегистрирован в app.state", name)
        raise ServiceUnavailableError("Хранилище недоступно", extra={"repository": name})
    return repository


def get_product_repository(request: Request) -> ProductRepository:
    """
    Провайдер хранилища товаров.

    Raises:
        ServiceUnavailableError: Если слой хранения не зарегистрировал репозиторий.
    """
    return _get_repository(request, PRODUCT_REPOSITORY)


def get_category_repository(request: Request) -> CategoryRepository:
    return _get_repository(request, CATEGORY_REPOSITORY)


def get_user_repository(request: Request) -> UserRepository:
    return _get_repository(request, USER_REPOSITORY)


ProductRepositoryDep = Annotated[ProductRepository, Depends(get_product_repository)]
CategoryRepositoryDep = Annotated[CategoryRepository, Depends(get_category_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
