"""
Модуль cache.py — настройки кеширования для приложения.

Содержит класс CacheSettings для централизованного хранения параметров кеша:
включение/отключение, выбор бэкенда (memory, redis, none), строка подключения
к Redis, TTL по умолчанию, префикс ключей и пресеты TTL для сущностей.

Настройки валидируются один раз при старте процесса: неизвестный бэкенд или
некорректная строка подключения приводят к ошибке запуска, а не к ошибке
отдельного запроса.

Экспортируемые объекты:
- CacheBackendType: Перечисление поддерживаемых бэкендов.
- CacheSettings: Класс настроек кеширования (через pydantic).
"""

from datetime import timedelta
from enum import Enum
from typing import Any

from pydantic import PositiveInt, RedisDsn, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheBackendType(str, Enum):
    """
    Тип кеш-бэкенда.

    Attributes:
        MEMORY: Кеш в памяти процесса.
        REDIS: Сетевой кеш через Redis.
        NONE: Кеш отключен (No-Op).
    """

    MEMORY = "memory"
    REDIS = "redis"
    NONE = "none"


# Альтернативные имена бэкендов, принимаемые из окружения
BACKEND_ALIASES = {
    "in-process": CacheBackendType.MEMORY,
    "inmemory": CacheBackendType.MEMORY,
    "in_memory": CacheBackendType.MEMORY,
    "networked": CacheBackendType.REDIS,
    "disabled": CacheBackendType.NONE,
    "null": CacheBackendType.NONE,
}


class CacheSettings(BaseSettings):
    """
    Конфигурация кеширования приложения.

    Атрибуты:
        CACHE_ENABLED (bool): Включено ли кеширование.
        CACHE_BACKEND (CacheBackendType): Бэкенд кеша (memory, redis, none).
        CACHE_REDIS_URL (RedisDsn | None): Строка подключения к Redis.
        CACHE_REDIS_POOL_SIZE (int): Размер пула соединений Redis.
        CACHE_DEFAULT_EXPIRATION_MINUTES (int): TTL по умолчанию в минутах.
        CACHE_KEY_PREFIX (str | None): Префикс (namespace) для всех ключей.
        CACHE_ENABLE_COMPRESSION (bool): Сжатие значений (только Redis).
        CACHE_SWEEP_INTERVAL_SECONDS (int): Интервал фоновой очистки истекших
            ключей in-memory кеша (0 отключает очистку).
        CACHE_USER_TTL_MINUTES (int): TTL для пользователей.
        CACHE_PRODUCT_TTL_MINUTES (int): TTL для товаров.
        CACHE_CATEGORY_TTL_MINUTES (int): TTL для категорий.
    """

    CACHE_ENABLED: bool = True
    CACHE_BACKEND: CacheBackendType = CacheBackendType.MEMORY
    CACHE_REDIS_URL: RedisDsn | None = None
    CACHE_REDIS_POOL_SIZE: PositiveInt = 10
    CACHE_DEFAULT_EXPIRATION_MINUTES: PositiveInt = 30
    CACHE_KEY_PREFIX: str | None = None
    CACHE_ENABLE_COMPRESSION: bool = False
    CACHE_SWEEP_INTERVAL_SECONDS: int = 60

    # Пресеты TTL для сущностей
    CACHE_USER_TTL_MINUTES: PositiveInt = 30
    CACHE_PRODUCT_TTL_MINUTES: PositiveInt = 15
    CACHE_CATEGORY_TTL_MINUTES: PositiveInt = 60

    @field_validator("CACHE_BACKEND", mode="before")
    @classmethod
    def normalize_backend(cls, value: Any) -> Any:
        """Приводит имя бэкенда к каноническому виду (регистр, алиасы)."""
        if isinstance(value, str):
            name = value.strip().lower()
            return BACKEND_ALIASES.get(name, name)
        return value

    @field_validator("CACHE_KEY_PREFIX")
    @classmethod
    def validate_key_prefix(cls, value: str | None) -> str | None:
        """Пустой префикс считается отсутствующим; разделитель ':' запрещен."""
        if value is None or not value.strip():
            return None
        if ":" in value:
            raise ValueError("CACHE_KEY_PREFIX не должен содержать ':'")
        return value.strip()

    @field_validator("CACHE_SWEEP_INTERVAL_SECONDS")
    @classmethod
    def validate_sweep_interval(cls, value: int) -> int:
        if value < 0:
            raise ValueError("CACHE_SWEEP_INTERVAL_SECONDS не может быть отрицательным")
        return value

    @model_validator(mode="after")
    def validate_redis_url(self) -> "CacheSettings":
        """Для Redis-бэкенда строка подключения обязательна."""
        if self.is_active and self.CACHE_BACKEND is CacheBackendType.REDIS and self.CACHE_REDIS_URL is None:
            raise ValueError("CACHE_REDIS_URL обязателен для CACHE_BACKEND=redis")
        return self

    @property
    def is_active(self) -> bool:
        """Проверяет, используется ли реальный кеш."""
        return self.CACHE_ENABLED and self.CACHE_BACKEND is not CacheBackendType.NONE

    @property
    def effective_backend(self) -> CacheBackendType:
        """Возвращает бэкенд с учетом флага CACHE_ENABLED."""
        return self.CACHE_BACKEND if self.is_active else CacheBackendType.NONE

    @property
    def default_ttl(self) -> int:
        """TTL по умолчанию в секундах."""
        return self.CACHE_DEFAULT_EXPIRATION_MINUTES * 60

    @property
    def user_ttl(self) -> timedelta:
        return timedelta(minutes=self.CACHE_USER_TTL_MINUTES)

    @property
    def product_ttl(self) -> timedelta:
        return timedelta(minutes=self.CACHE_PRODUCT_TTL_MINUTES)

    @property
    def category_ttl(self) -> timedelta:
        return timedelta(minutes=self.CACHE_CATEGORY_TTL_MINUTES)

    @property
    def redis_params(self) -> dict[str, Any]:
        """
        Параметры для создания Redis connection pool.

        Returns:
            dict: Параметры подключения к Redis.
        """
        return {
            "url": str(self.CACHE_REDIS_URL),
            "max_connections": self.CACHE_REDIS_POOL_SIZE,
            "socket_connect_timeout": 5,
            "socket_keepalive": True,
        }

    @property
    def service_params(self) -> dict[str, Any]:
        """
        Параметры для создания CacheService.

        Returns:
            dict: Префикс ключей и TTL по умолчанию.
        """
        return {
            "key_prefix": self.CACHE_KEY_PREFIX,
            "default_ttl": self.default_ttl,
        }

    model_config = SettingsConfigDict(extra="ignore")
