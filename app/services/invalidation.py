"""
Инвалидация кеша на пути записи.

Порядок всегда один: сначала запись фиксируется в хранилище, затем
удаляются устаревшие ключи. Если фиксация завершилась ошибкой, кеш не
трогается. Между фиксацией и инвалидацией конкурентный читатель может
успеть положить в кеш старое значение: такая запись живет не дольше TTL.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from .cache import CacheService

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CacheInvalidator:
    """
    Координатор инвалидации после успешной фиксации изменений.

    Attributes:
        cache (CacheService): Сервис кеширования.

    Example:
        >>> product = await invalidator.after_commit(
        ...     lambda: repository.update(product_id, data),
        ...     keys=[CacheKeys.product_by_id(product_id)],
        ...     patterns=[CacheKeys.products_list_pattern()],
        ... )
    """

    def __init__(self, cache: CacheService):
        self.cache = cache

    async def invalidate(
        self,
        keys: Iterable[str] = (),
        patterns: Iterable[str] = (),
    ) -> int:
        """
        Удалить ключи и все ключи по префиксным паттернам.

        Returns:
            int: Количество удаленных записей.
        """
        removed = 0
        for key in dict.fromkeys(keys):
            if await self.cache.delete(key):
                removed += 1
        for pattern in dict.fromkeys(patterns):
            removed += await self.cache.invalidate_pattern(pattern)

        logger.debug("Инвалидация завершена: удалено %d записей", removed)
        return removed

    async def after_commit(
        self,
        commit: Callable[[], Awaitable[T]],
        keys: Iterable[str] = (),
        patterns: Iterable[str] = (),
    ) -> T:
        """
        Выполнить фиксацию и после ее успеха инвалидировать кеш.

        Args:
            commit: Корутинная функция без аргументов, которая сохраняет
                изменения и фиксирует транзакцию.
            keys: Ключи сущностей для удаления.
            patterns: Префиксные паттерны коллекций.

        Returns:
            Результат commit().
        """
        result = await commit()
        await self.invalidate(keys, patterns)
        return result
