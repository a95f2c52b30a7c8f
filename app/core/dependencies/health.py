"""
Зависимости для сервиса проверки состояния.

Providers:
    - get_health_service: Провайдер для HealthService

Typed Dependencies:
    - HealthServiceDep: Типизированная зависимость для HealthService
"""

import logging
from typing import Annotated

from fastapi import Depends

from app.core.dependencies.cache import CacheServiceDep
from app.services.health import HealthService

logger = logging.getLogger(__name__)


def get_health_service(cache: CacheServiceDep) -> HealthService:
    """
    Провайдер для HealthService.

    Args:
        cache: Сервис кеширования процесса

    Returns:
        HealthService: Настроенный сервис проверки здоровья
    """
    logger.debug("Создание экземпляра HealthService")
    return HealthService(cache=cache)


HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]
