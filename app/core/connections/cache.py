"""
Модуль для работы с Redis.

Предоставляет классы для управления подключением к Redis:
- RedisClient: Клиент для установки и управления подключением к Redis

Redis используется как сетевой бэкенд кеша. Параметры подключения берутся из
CacheSettings (CACHE_REDIS_URL, CACHE_REDIS_POOL_SIZE).
"""

import asyncio

from redis.asyncio import Redis

from app.core.connections.base import BaseClient
from app.core.settings import CacheSettings, settings


class RedisClient(BaseClient[Redis]):
    """
    Клиент для работы с Redis.

    Создание клиента не открывает соединений: пул подключается при первой
    команде. Поэтому недоступный Redis не мешает старту приложения,
    а проявляется как промахи кеша и ошибки в логах.

    Attributes:
        _redis_params (dict): Параметры подключения к Redis из конфигурации
        _client (Optional[Redis]): Экземпляр клиента Redis
    """

    def __init__(self, cache_settings: CacheSettings | None = None) -> None:
        """
        Инициализация клиента Redis.

        Args:
            cache_settings (CacheSettings): Настройки кеша с параметрами подключения.
                По умолчанию используются глобальные настройки приложения.
        """
        super().__init__()
        self._redis_params = (cache_settings or settings.cache).redis_params
        self._client: Redis | None = None
        self._lock = asyncio.Lock()

    async def connect(self) -> Redis:
        """
        Создает клиента Redis с пулом соединений.

        Returns:
            Redis: Экземпляр Redis клиента
        """
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is None:
                params = dict(self._redis_params)
                self._client = Redis.from_url(params.pop("url"), **params)
                self.logger.info("Клиент Redis создан")
        return self._client

    async def close(self) -> None:
        """Закрывает подключение к Redis. Безопасно при повторном вызове."""
        async with self._lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None
                self.logger.info("Подключение к Redis закрыто")
