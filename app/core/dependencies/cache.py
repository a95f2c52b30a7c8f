"""
Зависимости для работы с кешем в FastAPI.

CacheService создается один раз при старте (app.core.lifespan.cache)
и берется из app.state.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from app.repository.cache import NoCacheBackend
from app.services.cache import CacheService

logger = logging.getLogger(__name__)


def get_cache_service(request: Request) -> CacheService:
    """
    Зависимость для получения сервиса кеширования процесса.

    Если кеш не был инициализирован (приложение запущено без lifespan),
    возвращается сервис поверх NoCacheBackend: запросы обслуживаются
    напрямую из хранилища.

    Returns:
        CacheService: Сервис кеширования

    Usage:
        ```python
        @router.get("/products/{product_id}")
        async def get_product(product_id: UUID, cache: CacheServiceDep):
            ...
        ```
    """
    service = getattr(request.app.state, "cache_service", None)
    if service is None:
        logger.warning("CacheService не инициализирован, кеширование отключено для запроса")
        return CacheService(NoCacheBackend())
    return service


# Типизированная зависимость
CacheServiceDep = Annotated[CacheService, Depends(get_cache_service)]
