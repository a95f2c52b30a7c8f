"""
Модуль подключений к внешним сервисам.

Exports:
    - RedisClient: Redis connection
"""

from .cache import RedisClient

__all__ = [
    "RedisClient",
]
