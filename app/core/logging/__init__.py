"""
Модуль настройки логирования.

Содержит функцию setup_logging для централизованной настройки логирования приложения.
Логгеры кеша (app.repository.cache.*, app.services.cache) пишут в root-логгер:
это единственный канал наблюдаемости для ошибок бэкенда кеша, которые
не пробрасываются в вызывающий код.
"""

import logging
from pathlib import Path

from app.core.settings import settings
from app.core.settings.paths import PathSettings

from .formatters import CustomJsonFormatter, PrettyFormatter


def _build_console_formatter() -> logging.Formatter:
    """Возвращает форматтер консоли согласно LOG_FORMAT."""
    log_format = settings.logging.LOG_FORMAT.lower()
    if log_format == "json":
        return CustomJsonFormatter()
    if log_format == "simple":
        return logging.Formatter(settings.logging.SIMPLE_FORMAT)
    return PrettyFormatter()


def _add_file_handler(root: logging.Logger, log_file: str) -> None:
    """
    Добавляет файловый обработчик с JSON-форматтером.

    Если основной путь недоступен для записи, используется резервный
    файл в PathSettings.LOGS_DIR.
    """
    for candidate in (Path(log_file), PathSettings.LOGS_DIR / "app.log"):
        try:
            candidate.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                filename=candidate,
                mode=settings.logging.FILE_MODE,
                encoding=settings.logging.ENCODING,
            )
        except OSError as e:
            root.warning("Не удалось использовать файл логов %s: %s", candidate, e)
            continue

        file_handler.setFormatter(CustomJsonFormatter())
        root.addHandler(file_handler)
        return


def setup_logging() -> None:
    """
    Настраивает систему логирования в приложении.

    - Очищает все старые обработчики root-логгера
    - Добавляет консольный обработчик с выбранным форматтером (pretty/json/simple)
    - Добавляет файловый обработчик с JSON-форматтером, если задан LOG_FILE
    - Устанавливает уровень логирования согласно настройкам
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)

    if settings.logging.CONSOLE_ENABLED:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_build_console_formatter())
        root.addHandler(console_handler)

    if settings.logging.LOG_FILE:
        _add_file_handler(root, settings.logging.LOG_FILE)

    root.setLevel(settings.logging.LOG_LEVEL)

    # Подавляем логи от некоторых библиотек
    for logger_name in settings.logging.QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
