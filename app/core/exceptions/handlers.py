"""
Модуль обработчиков исключений для FastAPI.

Обработчики преобразуют исключения в единый JSON-ответ формата
ErrorResponseSchema: success=False, message=None, data=None, error={...}.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.status import (
    HTTP_422_UNPROCESSABLE_CONTENT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from .base import BaseAPIException, app_tz

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    detail: str,
    error_type: str,
    request_id: str | None = None,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Создает стандартизированный JSON-ответ с информацией об ошибке.

    Args:
        status_code: HTTP код состояния
        detail: Подробное описание ошибки
        error_type: Тип ошибки для идентификации на клиенте
        request_id: Уникальный идентификатор запроса (генерируется, если не указан)
        extra: Дополнительные данные об ошибке

    Returns:
        JSONResponse: HTTP-ответ со стандартизированной структурой
    """
    content = {
        "success": False,
        "message": None,
        "data": None,
        "error": {
            "detail": detail,
            "error_type": error_type,
            "status_code": status_code,
            "timestamp": datetime.now(app_tz).isoformat(),
            "request_id": request_id or str(uuid.uuid4()),
            "extra": extra,
        },
    }

    return JSONResponse(status_code=status_code, content=content)


async def api_exception_handler(_request: Request, exc: BaseAPIException):
    """Обработчик исключений, наследующихся от BaseAPIException."""
    logger.warning(
        "API исключение: %s - %s",
        exc.error_type,
        exc.detail,
        extra={
            "request_method": _request.method,
            "request_url": str(_request.url),
        },
    )

    return create_error_response(
        status_code=exc.status_code,
        detail=exc.detail,
        error_type=exc.error_type,
        request_id=exc.extra.get("request_id"),
        extra=exc.extra,
    )


async def http_exception_handler(_request: Request, exc: HTTPException):
    """Обработчик стандартных HTTP-исключений Starlette."""
    logger.warning(
        "HTTP исключение %d: %s",
        exc.status_code,
        str(exc.detail),
        extra={"request_method": _request.method, "request_url": str(_request.url)},
    )

    return create_error_response(
        status_code=exc.status_code,
        detail=str(exc.detail),
        error_type="http_error",
    )


async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    """Обработчик ошибок валидации данных запроса."""
    errors = [{"loc": err["loc"], "msg": err["msg"]} for err in exc.errors()]

    logger.warning(
        "Ошибка валидации данных: %d ошибок",
        len(errors),
        extra={"request_method": _request.method, "request_url": str(_request.url)},
    )

    return create_error_response(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        detail="Ошибка валидации данных",
        error_type="validation_error",
        extra={"errors": errors},
    )


async def internal_exception_handler(_request: Request, exc: Exception):
    """
    Общий обработчик непредвиденных ошибок.

    Сюда попадают, например, CacheSerializationError: это ошибка кода,
    а не сбой кеша, поэтому она не подавляется.
    """
    logger.error(
        "Необработанное исключение: %s",
        str(exc),
        exc_info=True,
        extra={
            "exception_type": type(exc).__name__,
            "request_method": _request.method,
            "request_url": str(_request.url),
        },
    )

    return create_error_response(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Внутренняя ошибка сервера",
        error_type="internal_error",
        extra={"error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Регистрация обработчиков исключений в FastAPI-приложении.

    Args:
        app (FastAPI): Экземпляр FastAPI-приложения.
    """
    app.add_exception_handler(BaseAPIException, api_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
