"""Базовый класс для роутеров приложения."""

from collections.abc import Sequence

from fastapi import APIRouter


class BaseRouter:
    """
    Базовый класс для роутеров.

    Дочерний класс объявляет маршруты в configure(), который вызывается
    сразу после создания APIRouter.

    Attributes:
        router (APIRouter): FastAPI роутер с заданным префиксом и тегами
    """

    def __init__(self, prefix: str = "", tags: Sequence[str] | None = None):
        self.router = APIRouter(
            prefix=f"/{prefix}" if prefix else "",
            tags=list(tags or []),
        )
        self.configure()

    def configure(self):
        """Переопределяется в дочерних классах для настройки роутов"""

    def get_router(self) -> APIRouter:
        return self.router
