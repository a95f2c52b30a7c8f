"""
Сервис кеширования (cache-aside).

CacheService стоит между обработчиками и хранилищем:
- добавляет namespace ("{prefix}:{key}") к каждому ключу и паттерну
- подставляет TTL по умолчанию
- сериализует значения в JSON через pydantic-core и обратно
- реализует get_or_set поверх одного бэкенда

Бэкенд выбирается один раз при старте (см. build_cache_backend)
и не меняется во время работы процесса.
"""

import inspect
import logging
import math
from collections.abc import Awaitable, Callable
from datetime import timedelta
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError, from_json, to_json

from app.core.exceptions import CacheSerializationError
from app.core.settings import CacheSettings
from app.repository.cache import CacheBackend
from app.repository.cache.keys import KEY_SEP

T = TypeVar("T")

Loader = Callable[[], Awaitable[T | None] | T | None]
TTL = int | float | timedelta | None

logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def _type_adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


class CacheService:
    """
    Сервис кеширования поверх выбранного бэкенда.

    Attributes:
        backend (CacheBackend): Бэкенд кеша.
        key_prefix (str | None): Namespace для всех ключей.
        default_ttl (int): TTL по умолчанию в секундах.

    Example:
        >>> service = CacheService(InMemoryCacheBackend(), key_prefix="app")
        >>> product = await service.get_or_set(
        ...     CacheKeys.product_by_id(product_id),
        ...     lambda: repository.get_by_id(product_id),
        ...     ttl=timedelta(minutes=15),
        ...     schema=ProductSchema,
        ... )
    """

    def __init__(
        self,
        backend: CacheBackend,
        key_prefix: str | None = None,
        default_ttl: int = 1800,
    ):
        if default_ttl <= 0:
            raise ValueError(f"TTL по умолчанию должен быть положительным, получено {default_ttl}")

        self.backend = backend
        self.key_prefix = key_prefix or None
        self.default_ttl = default_ttl

    @classmethod
    def from_settings(cls, backend: CacheBackend, cache_settings: CacheSettings) -> "CacheService":
        """Создать сервис с префиксом и TTL из настроек."""
        return cls(backend, **cache_settings.service_params)

    def _full_key(self, key: str) -> str:
        if not key:
            raise ValueError("Ключ кеша не может быть пустым")
        if self.key_prefix is None:
            return key
        return f"{self.key_prefix}{KEY_SEP}{key}"

    def _resolve_ttl(self, ttl: TTL) -> int:
        if ttl is None:
            return self.default_ttl

        seconds = math.ceil(ttl.total_seconds() if isinstance(ttl, timedelta) else ttl)
        if seconds <= 0:
            raise ValueError(f"TTL должен быть положительным, получено {ttl!r}")
        return seconds

    @staticmethod
    def _serialize(key: str, value: Any) -> bytes:
        try:
            return to_json(value)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise CacheSerializationError(key, str(e)) from e

    @staticmethod
    def _deserialize(raw: bytes, schema: Any | None) -> Any:
        if schema is None:
            return from_json(raw)
        return _type_adapter(schema).validate_json(raw)

    async def get(self, key: str, schema: Any | None = None) -> Any | None:
        """
        Получить значение из кеша.

        Поврежденные данные (невалидный JSON или несоответствие схеме)
        считаются промахом, запись удаляется.

        Args:
            key (str): Ключ без namespace.
            schema: Тип для валидации (pydantic-модель, list[Model] и т.п.).
                Без схемы возвращаются JSON-совместимые данные.

        Returns:
            Значение или None при промахе.
        """
        full_key = self._full_key(key)
        raw = await self.backend.get(full_key)
        if raw is None:
            return None

        try:
            return self._deserialize(raw, schema)
        except ValueError as e:
            logger.warning("Cache CORRUPT: %s, запись удалена: %s", full_key, e)
            await self.backend.delete(full_key)
            return None

    async def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """
        Сохранить значение в кеш, заменив прежнее.

        Args:
            key (str): Ключ без namespace.
            value: Значение (pydantic-модель, dict, list, примитив).
            ttl (int | float | timedelta | None): Время жизни в секундах, дробное
                значение округляется вверх (None означает TTL по умолчанию).

        Returns:
            bool: True если бэкенд сохранил значение.

        Raises:
            CacheSerializationError: Если значение нельзя сериализовать.
        """
        full_key = self._full_key(key)
        seconds = self._resolve_ttl(ttl)
        payload = self._serialize(full_key, value)
        return await self.backend.set(full_key, payload, seconds)

    async def delete(self, key: str) -> bool:
        return await self.backend.delete(self._full_key(key))

    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Удалить все ключи по префиксному паттерну в пределах namespace.

        Args:
            pattern (str): Паттерн без namespace, например "products:list*".

        Returns:
            int: Количество удаленных ключей.
        """
        return await self.backend.invalidate_pattern(self._full_key(pattern))

    async def exists(self, key: str) -> bool:
        return await self.backend.exists(self._full_key(key))

    async def clear(self) -> None:
        """
        Очистить кеш.

        С префиксом удаляется только свой namespace, без префикса
        очищается весь бэкенд.
        """
        if self.key_prefix is None:
            await self.backend.clear()
            return

        count = await self.backend.invalidate_pattern(f"{self.key_prefix}{KEY_SEP}*")
        logger.info("Cache CLEAR: namespace '%s', deleted=%d keys", self.key_prefix, count)

    async def get_or_set(
        self,
        key: str,
        loader: Loader,
        ttl: TTL = None,
        schema: Any | None = None,
    ) -> Any | None:
        """
        Вернуть значение из кеша или загрузить и закешировать его.

        Загрузчик вызывается без аргументов и может быть как обычной,
        так и асинхронной функцией. Результат None не кешируется.
        Исключение загрузчика пробрасывается, в кеш ничего не пишется.

        Args:
            key (str): Ключ без namespace.
            loader: Загрузчик значения из хранилища.
            ttl (int | timedelta | None): Время жизни записи.
            schema: Тип для валидации закешированного значения.

        Returns:
            Значение из кеша или результат загрузчика.
        """
        cached = await self.get(key, schema)
        if cached is not None:
            return cached

        value = loader()
        if inspect.isawaitable(value):
            value = await value

        if value is not None:
            await self.set(key, value, ttl)
        return value
