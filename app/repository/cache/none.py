"""
Заглушка для отключенного кеша.

Используется когда кеширование отключено в конфигурации (CACHE_ENABLED=false
или CACHE_BACKEND=none). Код вызывающей стороны одинаков независимо от того,
включен кеш или нет: все операции принимаются и ничего не делают.
"""

import logging

from .backend import CacheBackend

logger = logging.getLogger(__name__)


class NoCacheBackend(CacheBackend):
    """
    Пустая реализация кеша (No-Op).

    - get всегда возвращает промах
    - set/delete/invalidate_pattern/clear принимаются и отбрасываются
    - exists всегда False

    Example:
        >>> cache = NoCacheBackend()
        >>> await cache.set("key", b"value", ttl=60)  # Ничего не делает
        >>> await cache.get("key")  # Всегда None
    """

    name = "none"

    async def get(self, key: str) -> bytes | None:
        logger.debug("NoCacheBackend: get(%s) -> None (cache disabled)", key)
        return None

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        logger.debug("NoCacheBackend: set(%s, ..., ttl=%d) -> False (cache disabled)", key, ttl)
        return False

    async def delete(self, key: str) -> bool:
        logger.debug("NoCacheBackend: delete(%s) -> False (cache disabled)", key)
        return False

    async def invalidate_pattern(self, pattern: str) -> int:
        logger.debug("NoCacheBackend: invalidate_pattern(%s) -> 0 (cache disabled)", pattern)
        return 0

    async def clear(self) -> None:
        logger.debug("NoCacheBackend: clear() (cache disabled)")

    async def exists(self, key: str) -> bool:
        return False
