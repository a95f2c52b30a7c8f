"""Main FastAPI application."""

from fastapi import FastAPI

from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.settings import settings
from app.routers import setup_routers


def create_application() -> FastAPI:
    """
    Создает и настраивает экземпляр приложения FastAPI.

    Настраивает логирование, регистрирует обработчики исключений и роуты.
    Кеш инициализируется в lifespan (app.core.lifespan.cache).

    Returns:
        FastAPI: Настроенный экземпляр приложения FastAPI.
    """
    app = FastAPI(**settings.app_params)
    setup_logging()
    register_exception_handlers(app=app)
    setup_routers(app)
    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, **settings.uvicorn_params)
