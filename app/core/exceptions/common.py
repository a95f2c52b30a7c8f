"""
Общие исключения для API.

Содержит исключения, которые используются сервисами каталога и зависимостями.
"""

from typing import Any

from starlette.status import HTTP_404_NOT_FOUND, HTTP_503_SERVICE_UNAVAILABLE

from .base import BaseAPIException


class NotFoundError(BaseAPIException):
    """
    Исключение для случая, когда запрашиваемый ресурс не найден.

    Отсутствие записи никогда не кешируется: загрузчик вернул None,
    сервис поднимает NotFoundError, и следующий запрос снова пойдет в хранилище.

    Attributes:
        status_code (int): HTTP_404_NOT_FOUND.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "not_found".
    """

    def __init__(
        self,
        detail: str = "Ресурс не найден",
        field: str | None = None,
        value: Any | None = None,
        extra: dict[Any, Any] | None = None,
    ):
        """
        Инициализация исключения NotFoundError.

        Args:
            detail (str): Сообщение об ошибке.
            field (str, optional): Название поля, по которому искали.
            value (Any, optional): Значение, которое не было найдено.
            extra (Dict, optional): Дополнительные данные.
        """
        extra = dict(extra or {})

        if field is not None and value is not None:
            extra.update({"field": field, "value": str(value)})

        super().__init__(
            status_code=HTTP_404_NOT_FOUND,
            detail=detail,
            error_type="not_found",
            extra=extra,
        )


class EntityNotFoundError(NotFoundError):
    """
    Сущность каталога (товар, категория, пользователь) не найдена.

    Args:
        entity (str): Название сущности, например "Product".
        value (Any): Идентификатор, по которому искали.
        field (str): Поле поиска (по умолчанию "id").
    """

    def __init__(self, entity: str, value: Any, field: str = "id"):
        super().__init__(
            detail=f"{entity} с {field}={value} не найден",
            field=field,
            value=value,
            extra={"entity": entity},
        )


class ServiceUnavailableError(BaseAPIException):
    """
    Зависимость приложения не подключена или недоступна.

    Attributes:
        status_code (int): HTTP_503_SERVICE_UNAVAILABLE.
        error_type (str): Тип ошибки "service_unavailable".
    """

    def __init__(self, detail: str = "Сервис временно недоступен", extra: dict[Any, Any] | None = None):
        super().__init__(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_type="service_unavailable",
            extra=extra,
        )
