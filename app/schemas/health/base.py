"""
Базовые схемы для health check.

Содержит схемы данных для проверки состояния приложения.
"""

from pydantic import Field

from app.schemas import CommonBaseSchema


class HealthCheckDataSchema(CommonBaseSchema):
    """
    Схема данных для health check.

    Attributes:
        app (str): Статус приложения
        cache (str): Статус кеша
        cache_backend (str): Используемый бэкенд кеша
    """

    app: str = Field(default="ok", description="Статус приложения", examples=["ok"])
    cache: str = Field(
        default="ok",
        description="Доступность бэкенда кеша",
        examples=["ok", "fail", "disabled"],
    )
    cache_backend: str = Field(
        description="Бэкенд кеша, выбранный при старте",
        examples=["memory", "redis", "none"],
    )
