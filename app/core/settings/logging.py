"""
Модуль logging.py — настройки логирования для приложения.

Содержит класс LoggingSettings с параметрами логирования: уровень, формат
консольного вывода (pretty, json, simple) и необязательный файл логов.

Экспортируемые объекты:
- LoggingSettings: Класс настроек логирования (через pydantic).
"""

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """
    Конфигурация логирования приложения.

    Атрибуты:
        LOG_LEVEL (str): Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FORMAT (str): Формат логирования (pretty, json, simple).
        LOG_FILE (str | None): Путь к файлу логов (None, если файл не нужен).
        ENCODING (str): Кодировка файла логов.
        FILE_MODE (str): Режим открытия файла логов.
        CONSOLE_ENABLED (bool): Включено ли логирование в консоль.
        QUIET_LOGGERS (list[str]): Сторонние логгеры, ограниченные уровнем WARNING.
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "pretty"  # pretty, json, simple
    LOG_FILE: str | None = None
    ENCODING: str = "utf-8"
    FILE_MODE: str = "a"

    CONSOLE_ENABLED: bool = True

    QUIET_LOGGERS: list[str] = ["redis", "httpx", "httpcore", "asyncio"]

    PRETTY_FORMAT: str = (
        "\033[1;36m%(asctime)s\033[0m - \033[1;32m%(name)s\033[0m - \033[1;33m%(levelname)s\033[0m - %(message)s"
    )

    JSON_FORMAT: dict = {
        "timestamp": "%(asctime)s",
        "level": "%(levelname)s",
        "logger": "%(name)s",
        "module": "%(module)s",
        "func": "%(funcName)s",
        "message": "%(message)s",
    }

    SIMPLE_FORMAT: str = "%(levelname)s - %(name)s - %(message)s"

    @property
    def is_json_format(self) -> bool:
        """Проверяет, используется ли JSON формат"""
        return self.LOG_FORMAT.lower() == "json"

    @property
    def file_handler_config(self) -> dict[str, Any]:
        """Конфигурация для файлового обработчика логов"""
        return {
            "filename": self.LOG_FILE,
            "mode": self.FILE_MODE,
            "encoding": self.ENCODING,
        }

    model_config = SettingsConfigDict(extra="ignore")
