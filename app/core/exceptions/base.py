"""
Базовый класс для исключений API.

Включает в себя:
- Логирование ошибок с контекстом.
- Генерацию уникального идентификатора для ошибки.
- Временную метку в формате ISO 8601 с учетом часового пояса из настроек.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

import pytz
from fastapi import HTTPException

from app.core.settings import settings

logger = logging.getLogger(__name__)
app_tz = pytz.timezone(settings.TIMEZONE)


class BaseAPIException(HTTPException):
    """
    Базовый класс для исключений API.

    Attributes:
        status_code: Код статуса HTTP.
        detail: Сообщение об ошибке.
        error_type: Тип ошибки.
        extra: Дополнительные данные для контекста.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_type: str,
        extra: dict[Any, Any] | None = None,
    ) -> None:
        self.error_type = error_type
        self.extra = extra or {}

        context = {
            "timestamp": datetime.now(app_tz).isoformat(),
            "request_id": str(uuid.uuid4()),
            "status_code": status_code,
            "error_type": error_type,
            **self.extra,
        }

        logger.warning(detail, extra=context)
        super().__init__(status_code=status_code, detail=detail)
