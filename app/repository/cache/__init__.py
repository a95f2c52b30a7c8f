"""
Модуль кеширования для репозиториев.

Предоставляет абстрактный интерфейс и реализации кеша:
- CacheBackend: Абстрактный интерфейс
- RedisCacheBackend: Production кеш через Redis
- InMemoryCacheBackend: Кеш в памяти процесса
- NoCacheBackend: Заглушка для отключенного кеша
- build_cache_backend: Выбор реализации по настройкам
- CacheKeys, build_key: Построение ключей

Example:
    >>> from app.repository.cache import build_cache_backend
    >>> backend = build_cache_backend(settings.cache)
    >>> await backend.set("product:id:1", b"{}", ttl=300)
"""

from .backend import CacheBackend, matches_pattern, parse_pattern
from .factory import build_cache_backend
from .keys import CacheKeys, build_key
from .memory import CacheEntry, InMemoryCacheBackend
from .none import NoCacheBackend
from .redis import RedisCacheBackend

__all__ = [
    "CacheBackend",
    "RedisCacheBackend",
    "InMemoryCacheBackend",
    "NoCacheBackend",
    "CacheEntry",
    "CacheKeys",
    "build_key",
    "build_cache_backend",
    "matches_pattern",
    "parse_pattern",
]
