"""
Модуль инициализации настроек приложения.

Этот модуль предоставляет глобальный доступ к объекту настроек приложения (`settings`),
используя кэширование через декоратор `lru_cache`. Объект настроек (`Settings`)
создаётся и валидируется только один раз за время жизни процесса: ошибки
конфигурации (например, неизвестный бэкенд кеша) обнаруживаются при старте.

Экспортируемые объекты:
- settings: Глобальный экземпляр настроек приложения.
- Settings: Класс настроек приложения.
- CacheSettings: Класс настроек кеширования.
- CacheBackendType: Перечисление бэкендов кеша.
"""

from functools import lru_cache

from .base import Settings, env_file_path
from .cache import CacheBackendType, CacheSettings
from .logging import LoggingSettings


class CompositeSettings(Settings):
    """
    Композитный класс настроек.

    Вложенные группы читают тот же .env-файл, что и основные настройки.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.logging = LoggingSettings(_env_file=env_file_path)
        self.cache = CacheSettings(_env_file=env_file_path)


@lru_cache
def get_settings() -> CompositeSettings:
    """Получение настроек приложения из кэша."""
    return CompositeSettings()


settings = get_settings()

__all__ = ["settings", "Settings", "CacheSettings", "CacheBackendType", "get_settings"]
