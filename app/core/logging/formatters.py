"""
Модуль форматтеров для логирования.

PrettyFormatter: форматирует логи с цветами и эмодзи для удобного чтения в консоли
CustomJsonFormatter: форматирует логи в JSON формате для машинной обработки
"""

import json
import logging
from datetime import datetime

from app.core.settings import settings

# Стандартные атрибуты LogRecord; все остальные считаются переданными через extra
STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "asctime",
        "taskName",
    }
)


def extract_extra(record: logging.LogRecord) -> dict:
    """Возвращает поля, переданные в лог через extra."""
    return {k: v for k, v in vars(record).items() if k not in STANDARD_ATTRS}


class PrettyFormatter(logging.Formatter):
    """
    Добавляет цветовое оформление в зависимости от уровня логирования,
    а также соответствующие эмодзи.

    Attributes:
        COLORS: Словарь с ANSI-кодами цветов для разных уровней логирования
        EMOJIS: Словарь с эмодзи для разных уровней логирования
        RESET: ANSI-код для сброса форматирования
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    EMOJIS = {
        "DEBUG": "🔍",
        "INFO": "✨",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "💥",
    }

    RESET = "\033[0m"

    def format(self, record):
        extra_attrs = extract_extra(record)
        extra_msg = f"\033[33m[extra: {extra_attrs}]\033[0m" if extra_attrs else ""

        emoji = self.EMOJIS.get(record.levelname, "")

        base_msg = settings.logging.PRETTY_FORMAT % {
            "asctime": self.formatTime(record),
            "name": record.name,
            "levelname": f"{self.COLORS.get(record.levelname, '')}{record.levelname} {self.RESET}",
            "message": f"{emoji} {record.getMessage()}",
        }

        if record.exc_info:
            base_msg = f"{base_msg}\n{self.formatException(record.exc_info)}"

        return f"{base_msg} {extra_msg}" if extra_msg else base_msg


class CustomJsonFormatter(logging.Formatter):
    """
    Форматтер для вывода логов в JSON формате.

    Преобразует записи логов в структурированный JSON,
    используя шаблон JSON_FORMAT из настроек; поля extra добавляются как есть.
    """

    def format(self, record):
        log_data = settings.logging.JSON_FORMAT.copy()

        for key, value in log_data.items():
            if key == "timestamp":
                dt = datetime.fromtimestamp(record.created)
                log_data[key] = dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            else:
                log_data[key] = value % {
                    "asctime": self.formatTime(record),
                    "levelname": record.levelname,
                    "name": record.name,
                    "module": record.module,
                    "funcName": record.funcName,
                    "message": record.getMessage(),
                }

        extra_attrs = extract_extra(record)
        if extra_attrs:
            log_data["extra"] = extra_attrs

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)
