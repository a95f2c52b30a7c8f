"""
Модуль инициализации и завершения работы кеша для FastAPI-приложения.

Назначение:
- При запуске выбирает бэкенд кеша по настройкам (memory, redis, none),
  запускает фоновую очистку in-memory кеша и создает CacheService.
- Сохраняет бэкенд и сервис в app.state для доступа из зависимостей.
- При остановке освобождает ресурсы бэкенда (пул Redis, фоновую задачу).

Экспортируемые функции:
- initialize_cache: Инициализация кеша при старте приложения.
- close_cache: Освобождение ресурсов кеша при остановке приложения.
"""

import logging

from fastapi import FastAPI

from app.core.lifespan.base import register_shutdown_handler, register_startup_handler
from app.core.settings import settings
from app.repository.cache import InMemoryCacheBackend, build_cache_backend
from app.services.cache import CacheService

logger = logging.getLogger(__name__)


@register_startup_handler
async def initialize_cache(app: FastAPI):
    """
    Инициализация кеша при старте приложения.

    Flow:
        1. Создает бэкенд через build_cache_backend.
        2. Для in-memory бэкенда запускает фоновую очистку истекших записей.
        3. Создает CacheService с префиксом и TTL из настроек.
        4. Сохраняет бэкенд и сервис в app.state.

    Raises:
        CacheConfigurationError: Если конфигурация кеша некорректна.
    """
    backend = build_cache_backend(settings.cache)
    if isinstance(backend, InMemoryCacheBackend):
        backend.start()

    app.state.cache_backend = backend
    app.state.cache_service = CacheService.from_settings(backend, settings.cache)
    logger.info("Кеш инициализирован: backend=%s, prefix=%s", backend.name, settings.cache.CACHE_KEY_PREFIX)


@register_shutdown_handler
async def close_cache(app: FastAPI):
    """Освобождение ресурсов кеша при остановке приложения."""
    backend = getattr(app.state, "cache_backend", None)
    if backend is not None:
        await backend.close()
        logger.info("Кеш остановлен: backend=%s", backend.name)
