"""
Схемы ответов для health check endpoints.
"""

from pydantic import Field

from app.schemas import BaseResponseSchema

from .base import HealthCheckDataSchema


class HealthCheckResponseSchema(BaseResponseSchema):
    """
    Ответ health check.

    Attributes:
        success (bool): Всегда True, если приложение ответило
        message (str): Сообщение о статусе (включая недоступность кеша)
        data (HealthCheckDataSchema): Статусы приложения и кеша
    """

    data: HealthCheckDataSchema = Field(..., description="Статусы приложения и бэкенда кеша")
