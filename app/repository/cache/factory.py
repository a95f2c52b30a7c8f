"""Фабрика кеш-бэкенда: выбирает реализацию по настройкам один раз при старте."""

import logging

from app.core.connections.cache import RedisClient
from app.core.exceptions import CacheConfigurationError
from app.core.settings import CacheBackendType, CacheSettings

from .backend import CacheBackend
from .memory import InMemoryCacheBackend
from .none import NoCacheBackend
from .redis import RedisCacheBackend

logger = logging.getLogger(__name__)


def build_cache_backend(
    cache_settings: CacheSettings,
    redis_client: RedisClient | None = None,
) -> CacheBackend:
    """
    Создать кеш-бэкенд по настройкам.

    Args:
        cache_settings (CacheSettings): Провалидированные настройки кеша.
        redis_client (RedisClient | None): Готовый держатель подключения
            (если None, создается из настроек).

    Returns:
        CacheBackend: NoCacheBackend, InMemoryCacheBackend или RedisCacheBackend.

    Raises:
        CacheConfigurationError: Неизвестный бэкенд или нет строки подключения.
    """
    backend_type = cache_settings.effective_backend

    if backend_type is CacheBackendType.NONE:
        logger.info("Кеширование отключено: используется NoCacheBackend")
        return NoCacheBackend()

    if backend_type is CacheBackendType.MEMORY:
        if cache_settings.CACHE_ENABLE_COMPRESSION:
            logger.info("CACHE_ENABLE_COMPRESSION не поддерживается in-memory кешем и игнорируется")
        logger.info("Используется in-memory кеш")
        return InMemoryCacheBackend(sweep_interval=cache_settings.CACHE_SWEEP_INTERVAL_SECONDS)

    if backend_type is CacheBackendType.REDIS:
        if cache_settings.CACHE_REDIS_URL is None:
            raise CacheConfigurationError("CACHE_REDIS_URL обязателен для CACHE_BACKEND=redis")
        logger.info("Используется Redis кеш (сжатие: %s)", cache_settings.CACHE_ENABLE_COMPRESSION)
        return RedisCacheBackend(
            client=redis_client or RedisClient(cache_settings),
            compress=cache_settings.CACHE_ENABLE_COMPRESSION,
        )

    raise CacheConfigurationError(f"Неизвестный бэкенд кеша: {backend_type!r}")
