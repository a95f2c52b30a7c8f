"""
Сервис для проверки состояния приложения и кеша.
"""

from app.services.base import BaseService
from app.services.cache import CacheService


class HealthService(BaseService):
    """
    Сервис для проверки состояния приложения и его зависимостей.

    Недоступный кеш не делает приложение неработоспособным: запросы
    продолжают обслуживаться из хранилища. Поэтому check() сообщает
    статус кеша, но не поднимает исключений.

    Attributes:
        cache (CacheService): Сервис кеширования

    Methods:
        check: Проверяет состояние приложения и бэкенда кеша
        check_liveness: Быстрая проверка жизнеспособности без зависимостей
    """

    def __init__(self, cache: CacheService):
        super().__init__()
        self.cache = cache

    async def check(self) -> dict[str, str]:
        """
        Проверяет состояние приложения и бэкенда кеша.

        Returns:
            Dict[str, str]: Статусы (app, cache, cache_backend)
        """
        self.logger.info("Checking application health")

        backend = self.cache.backend
        if backend.name == "none":
            cache_status = "disabled"
        else:
            cache_status = "ok" if await backend.health_check() else "fail"

        status = {
            "app": "ok",
            "cache": cache_status,
            "cache_backend": backend.name,
        }

        if cache_status == "fail":
            self.logger.error("Кеш недоступен: %s", backend.name)
        self.logger.info("Health check completed: %s", status)

        return status

    async def check_liveness(self) -> dict[str, str]:
        """
        Быстрая проверка жизнеспособности без обращения к кешу.

        Returns:
            Dict[str, str]: Минимальный словарь со статусом
        """
        self.logger.debug("Liveness check")

        return {
            "app": "ok",
            "cache": "unknown",
            "cache_backend": self.cache.backend.name,
        }
