"""
In-memory кеш с поддержкой TTL.

Хранит записи в словаре, защищенном блокировкой, и ведет реестр живых ключей.
Словарь не умеет искать по префиксу, поэтому invalidate_pattern проходит по
снимку реестра. Реестр меняется под той же блокировкой, что и словарь, при
каждой записи, удалении и вытеснении.

Истекшие записи удаляются лениво (при get/exists) и фоновой задачей,
которая периодически вызывает purge_expired().
"""

import asyncio
import contextlib
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from .backend import CacheBackend, matches_pattern

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CacheEntry:
    """
    Запись in-memory кеша.

    Attributes:
        key (str): Полный ключ (с namespace).
        value (bytes): Сериализованное значение.
        expires_at (float): Момент истечения по часам бэкенда.
    """

    key: str
    value: bytes
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemoryCacheBackend(CacheBackend):
    """
    In-memory кеш с поддержкой TTL.

    Безопасен при конкурентном вызове из задач asyncio и из потоков:
    все изменения записи и реестра ключей выполняются под одной блокировкой
    и не содержат точек переключения, поэтому отмененная операция не оставляет
    частично записанных данных.

    Warning:
        Данные теряются при перезапуске и не разделяются между процессами.

    Attributes:
        _storage (dict[str, CacheEntry]): Записи кеша.
        _keys (set[str]): Реестр живых ключей для префиксного поиска.
        _clock (Callable[[], float]): Источник времени (подменяется в тестах).
        _sweep_interval (float): Интервал фоновой очистки в секундах (0 выключает очистку).

    Example:
        >>> cache = InMemoryCacheBackend()
        >>> await cache.set("product:id:1", b"{}", ttl=60)
        >>> await cache.get("product:id:1")
        b'{}'
    """

    name = "memory"

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sweep_interval: float = 0,
    ):
        self._storage: dict[str, CacheEntry] = {}
        self._keys: set[str] = set()
        self._lock = threading.RLock()
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._sweeper: asyncio.Task | None = None

    @property
    def size(self) -> int:
        """Количество хранимых записей (включая еще не удаленные истекшие)."""
        with self._lock:
            return len(self._storage)

    def registered_keys(self) -> set[str]:
        """Снимок реестра ключей."""
        with self._lock:
            return set(self._keys)

    def _evict(self, key: str) -> bool:
        """Удаляет запись и ключ из реестра. Вызывать под блокировкой."""
        self._keys.discard(key)
        return self._storage.pop(key, None) is not None

    def _get_live_entry(self, key: str) -> CacheEntry | None:
        """Возвращает живую запись, удаляя истекшую. Вызывать под блокировкой."""
        entry = self._storage.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock()):
            self._evict(key)
            logger.debug("Cache MISS: %s (expired)", key)
            return None

        return entry

    async def get(self, key: str) -> bytes | None:
        with self._lock:
            entry = self._get_live_entry(key)

        if entry is None:
            logger.debug("Cache MISS: %s", key)
            return None

        logger.debug("Cache HIT: %s", key)
        return entry.value

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        if ttl <= 0:
            raise ValueError(f"TTL должен быть положительным, получено {ttl}")

        with self._lock:
            self._storage[key] = CacheEntry(key=key, value=value, expires_at=self._clock() + ttl)
            self._keys.add(key)

        logger.debug("Cache SET: %s (TTL=%ds)", key, ttl)
        return True

    async def delete(self, key: str) -> bool:
        with self._lock:
            deleted = self._evict(key)

        if deleted:
            logger.debug("Cache DELETE: %s", key)
        else:
            logger.debug("Cache DELETE (not found): %s", key)
        return deleted

    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Инвалидировать все ключи по префиксному паттерну.

        Проходит по снимку реестра, не удерживая блокировку на весь проход.
        Ключ, добавленный во время прохода, может остаться: его закроет
        следующая инвалидация или истечение TTL.
        Истекшие, но еще не вычищенные записи удаляются без учета в счетчике.
        """
        matching_keys = [key for key in self.registered_keys() if matches_pattern(key, pattern)]

        count = 0
        for key in matching_keys:
            with self._lock:
                entry = self._storage.get(key)
                live = entry is not None and not entry.is_expired(self._clock())
                if self._evict(key) and live:
                    count += 1

        if count > 0:
            logger.info("Cache INVALIDATE: pattern='%s', deleted=%d keys", pattern, count)
        else:
            logger.debug("Cache INVALIDATE: pattern='%s', no keys found", pattern)

        return count

    async def clear(self) -> None:
        with self._lock:
            self._storage.clear()
            self._keys.clear()
        logger.debug("Cache CLEAR: all keys removed")

    async def exists(self, key: str) -> bool:
        with self._lock:
            return self._get_live_entry(key) is not None

    def purge_expired(self) -> int:
        """
        Удалить все истекшие записи независимо от обращений к ним.

        Returns:
            int: Количество удаленных записей.
        """
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._storage.items() if entry.is_expired(now)]

        count = 0
        for key in expired:
            with self._lock:
                entry = self._storage.get(key)
                # Запись могла быть обновлена после снимка
                if entry is not None and entry.is_expired(now) and self._evict(key):
                    count += 1

        if count:
            logger.debug("Cache SWEEP: removed %d expired keys", count)
        return count

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            self.purge_expired()

    def start(self) -> None:
        """Запустить фоновую очистку истекших записей (если интервал > 0)."""
        if self._sweep_interval > 0 and self._sweeper is None:
            self._sweeper = asyncio.create_task(self._sweep_loop(), name="cache-sweeper")
            logger.info("Фоновая очистка in-memory кеша запущена (интервал %ss)", self._sweep_interval)

    async def close(self) -> None:
        """Остановить фоновую очистку."""
        if self._sweeper is None:
            return

        self._sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._sweeper
        self._sweeper = None
        logger.info("Фоновая очистка in-memory кеша остановлена")
