"""
Реализация кеша через Redis.

Использует подключение из app.core.connections.cache. Значения приходят из
CacheService уже сериализованными (bytes) и при включенном сжатии
дополнительно сжимаются zlib.

Любая ошибка Redis (недоступен, таймаут, обрыв соединения) логируется
и превращается в безопасный результат: get/exists возвращают промах, операции
записи отбрасываются. Недоступность кеша не должна ломать основной путь
обработки запроса.
"""

import logging
import zlib

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.connections.cache import RedisClient

from .backend import CacheBackend, parse_pattern

logger = logging.getLogger(__name__)

# Ошибки, при которых операция деградирует до безопасного результата
REDIS_FAILURES = (RedisError, OSError)

# Спецсимволы glob-синтаксиса Redis MATCH
GLOB_SPECIAL_CHARS = frozenset("*?[]\\")


def escape_glob(value: str) -> str:
    """
    Экранирует glob-символы, чтобы префикс совпадал буквально.

    Example:
        >>> escape_glob("user:email:a*b")
        'user:email:a\\\\*b'
    """
    return "".join(f"\\{ch}" if ch in GLOB_SPECIAL_CHARS else ch for ch in value)


class RedisCacheBackend(CacheBackend):
    """
    Реализация кеша через Redis.

    TTL поддерживается нативно (SET ... EX). Инвалидация по паттерну
    выполняется через SCAN + пакетный UNLINK, без реестра ключей.

    Attributes:
        _client (RedisClient | None): Держатель подключения (lazy initialization).
        _redis (Redis | None): Клиент Redis.
        _compress (bool): Сжимать ли значения zlib.
        _scan_batch_size (int): Размер пакета SCAN/UNLINK.

    Example:
        >>> cache = RedisCacheBackend(RedisClient(settings.cache))
        >>> await cache.set("product:id:1", b"{}", ttl=900)
        >>> await cache.get("product:id:1")
    """

    name = "redis"

    def __init__(
        self,
        client: RedisClient | None = None,
        redis: Redis | None = None,
        compress: bool = False,
        scan_batch_size: int = 500,
    ):
        if client is None and redis is None:
            raise ValueError("Нужен RedisClient или готовый клиент Redis")

        self._client = client
        self._redis = redis
        self._compress = compress
        self._scan_batch_size = scan_batch_size

    async def _get_redis(self) -> Redis:
        """
        Получить Redis клиент (lazy initialization).

        Raises:
            RedisError: При ошибке подключения к Redis.
        """
        if self._redis is None:
            self._redis = await self._client.connect()
        return self._redis

    def _encode(self, value: bytes) -> bytes:
        return zlib.compress(value) if self._compress else value

    def _decode(self, raw: bytes) -> bytes:
        return zlib.decompress(raw) if self._compress else raw

    async def get(self, key: str) -> bytes | None:
        try:
            redis = await self._get_redis()
            raw_value = await redis.get(key)
        except REDIS_FAILURES as e:
            logger.error("Redis error on GET %s: %s", key, e)
            return None

        if raw_value is None:
            logger.debug("Cache MISS: %s", key)
            return None

        try:
            value = self._decode(raw_value)
        except zlib.error as e:
            logger.warning("Поврежденное сжатое значение для %s: %s", key, e)
            await self.delete(key)
            return None

        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        if ttl <= 0:
            raise ValueError(f"TTL должен быть положительным, получено {ttl}")

        payload = self._encode(value)
        try:
            redis = await self._get_redis()
            await redis.set(key, payload, ex=ttl)
        except REDIS_FAILURES as e:
            logger.error("Redis error on SET %s: %s", key, e)
            return False

        logger.debug("Cache SET: %s (TTL=%ds)", key, ttl)
        return True

    async def delete(self, key: str) -> bool:
        try:
            redis = await self._get_redis()
            result = await redis.delete(key)
        except REDIS_FAILURES as e:
            logger.error("Redis error on DELETE %s: %s", key, e)
            return False

        if result > 0:
            logger.debug("Cache DELETE: %s", key)
            return True

        logger.debug("Cache DELETE (not found): %s", key)
        return False

    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Инвалидировать все ключи по префиксу в Redis.

        Использует SCAN (не блокирует Redis) и удаляет найденные ключи
        пакетами через UNLINK.
        """
        prefix, is_prefix = parse_pattern(pattern)
        if not is_prefix:
            return int(await self.delete(prefix))

        count = 0
        try:
            redis = await self._get_redis()
            batch: list[bytes] = []
            async for key in redis.scan_iter(match=f"{escape_glob(prefix)}*", count=self._scan_batch_size):
                batch.append(key)
                if len(batch) >= self._scan_batch_size:
                    count += await redis.unlink(*batch)
                    batch = []

            if batch:
                count += await redis.unlink(*batch)
        except REDIS_FAILURES as e:
            logger.error("Redis error on INVALIDATE pattern '%s' (deleted %d): %s", pattern, count, e)
            return count

        if count > 0:
            logger.info("Cache INVALIDATE: pattern='%s', deleted=%d keys", pattern, count)
        else:
            logger.debug("Cache INVALIDATE: pattern='%s', no keys found", pattern)

        return count

    async def clear(self) -> None:
        try:
            redis = await self._get_redis()
            await redis.flushdb()
        except REDIS_FAILURES as e:
            logger.error("Redis error on FLUSHDB: %s", e)
            return

        logger.info("Cache CLEAR: database flushed")

    async def exists(self, key: str) -> bool:
        try:
            redis = await self._get_redis()
            return bool(await redis.exists(key))
        except REDIS_FAILURES as e:
            logger.error("Redis error on EXISTS %s: %s", key, e)
            return False

    async def health_check(self) -> bool:
        try:
            redis = await self._get_redis()
            return bool(await redis.ping())
        except REDIS_FAILURES as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._redis = None
