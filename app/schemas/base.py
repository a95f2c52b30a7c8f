"""
Модуль для определения базовых схем данных.

`CommonBaseSchema` наследуется от `BaseModel` библиотеки Pydantic и задает
общую конфигурацию валидации и сериализации. Она же используется кешем:
экземпляры схем сериализуются в JSON через pydantic-core и валидируются
обратно при чтении.

`BaseSchema` добавляет идентификатор и временные метки сущности.

`BaseRequestSchema` - для входных данных, где id и даты не передаются.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class CommonBaseSchema(BaseModel):
    """
    Общая базовая схема для всех моделей.
    Содержит только общую конфигурацию и метод to_dict().

    Attributes:
        model_config (ConfigDict): Конфигурация модели, позволяющая
        использовать атрибуты в качестве полей.

    Methods:
        to_dict(): Преобразует объект в словарь.
    """

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class BaseSchema(CommonBaseSchema):
    """
    Базовая схема для сущностей каталога.

    Attributes:
        id (uuid.UUID): Идентификатор записи.
        created_at (datetime): Дата и время создания записи.
        updated_at (datetime): Дата и время последнего обновления записи.
    """

    id: uuid.UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BaseRequestSchema(CommonBaseSchema):
    """
    Базовая схема для входных данных.

    Id и даты создания и обновления клиент не передает.
    """


class BaseResponseSchema(CommonBaseSchema):
    """
    Базовая схема для ответов API.

    Attributes:
        success (bool): Указывает, успешен ли запрос.
        message (Optional[str]): Сообщение, связанное с ответом.
    """

    success: bool = True
    message: str | None = None


class ErrorSchema(CommonBaseSchema):
    """
    Схема для представления данных об ошибке.

    Attributes:
        detail: Подробное описание ошибки
        error_type: Тип ошибки для идентификации на клиенте
        status_code: HTTP код ответа
        timestamp: Временная метка возникновения ошибки
        request_id: Уникальный идентификатор запроса
        extra: Дополнительные данные об ошибке
    """

    detail: str
    error_type: str
    status_code: int
    timestamp: str
    request_id: str
    extra: dict[str, Any] | None = None


class ErrorResponseSchema(BaseResponseSchema):
    """
    Модель для представления API ошибок в документации.

    Соответствует формату ответов, которые формирует handlers.py.

    Attributes:
        success: Всегда False для ошибок
        message: Информационное сообщение, обычно None для ошибок
        data: Всегда None для ошибок
        error: Детальная информация об ошибке
    """

    success: bool = False
    message: str | None = None
    data: None = None
    error: ErrorSchema
