"""Главный роутер: краткая информация о сервисе."""

from app.core.settings import settings
from app.routers.base import BaseRouter


class MainRouter(BaseRouter):
    """
    Роутер главной страницы приложения.
    """

    def __init__(self):
        super().__init__(prefix="", tags=["Main"])

    def configure(self):
        @self.router.get("/")
        async def root() -> dict[str, str]:
            """
            🏠 **Информация о сервисе.**

            **Returns**:
            - название, версия, выбранный бэкенд кеша и ссылка на документацию
            """
            return {
                "title": settings.TITLE,
                "version": settings.VERSION,
                "cache_backend": settings.cache.effective_backend.value,
                "docs": "/docs",
            }
