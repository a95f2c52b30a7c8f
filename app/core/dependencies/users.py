"""
Dependencies для работы с пользователями.

Модуль предоставляет dependency injection для UserService:
- UserService: профили пользователей с кешем по id и email
"""

from typing import Annotated

from fastapi import Depends

from app.core.dependencies.cache import CacheServiceDep
from app.core.dependencies.repositories import UserRepositoryDep
from app.services.v1 import UserService


def get_user_service(repository: UserRepositoryDep, cache: CacheServiceDep) -> UserService:
    """
    Создает экземпляр UserService с хранилищем пользователей и кешем.

    Args:
        repository: Хранилище пользователей
        cache: Сервис кеширования

    Returns:
        UserService: Сервис пользователей
    """
    return UserService(repository=repository, cache=cache)


# Типизированная зависимость для использования в роутерах
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
