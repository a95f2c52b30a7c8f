"""
Модуль управления жизненным циклом FastAPI приложения.

Предоставляет реестр обработчиков событий запуска и остановки приложения.
Обработчики регистрируются декораторами в своих модулях и выполняются
в порядке регистрации.

Ошибка конфигурации (FATAL_STARTUP_ERRORS) прерывает запуск: процесс
с некорректными настройками кеша не должен начинать обслуживать запросы.
Остальные ошибки обработчиков логируются, выполнение продолжается.

Usage:
    ```python
    # В модуле с обработчиками
    @register_startup_handler
    async def my_startup_handler(app: FastAPI):
        app.state.resource = await create_resource()

    # В settings
    from app.core.lifespan import lifespan

    @property
    def app_params(self) -> dict:
        return {"lifespan": lifespan}
    ```
"""

import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.exceptions import CacheConfigurationError

logger = logging.getLogger("app.core.lifespan.base")

# Типы
StartupHandler = Callable[[FastAPI], Awaitable[None]]
ShutdownHandler = Callable[[FastAPI], Awaitable[None]]

# Глобальные списки
startup_handlers: list[StartupHandler] = []
shutdown_handlers: list[ShutdownHandler] = []

# Ошибки, которые прерывают запуск приложения
FATAL_STARTUP_ERRORS = (CacheConfigurationError,)


def register_startup_handler(handler: StartupHandler):
    """
    Декоратор для регистрации обработчика события запуска приложения.

    Args:
        handler: Асинхронная функция-обработчик, принимающая экземпляр FastAPI

    Returns:
        StartupHandler: Исходная функция-обработчик
    """
    startup_handlers.append(handler)
    return handler


def register_shutdown_handler(handler: ShutdownHandler):
    """
    Декоратор для регистрации обработчика события остановки приложения.

    Args:
        handler: Асинхронная функция-обработчик, принимающая экземпляр FastAPI

    Returns:
        ShutdownHandler: Исходная функция-обработчик
    """
    shutdown_handlers.append(handler)
    return handler


async def run_startup_handlers(app: FastAPI):
    """
    Выполняет все зарегистрированные обработчики запуска приложения.

    Args:
        app: Экземпляр FastAPI приложения

    Raises:
        CacheConfigurationError: Если конфигурация кеша некорректна.
    """
    logger.info("Зарегистрированных обработчиков запуска: %d", len(startup_handlers))

    for handler in startup_handlers:
        try:
            logger.info("Запуск обработчика: %s", handler.__name__)
            await handler(app)
            logger.debug("Обработчик %s выполнен успешно", handler.__name__)
        except FATAL_STARTUP_ERRORS:
            logger.critical("Запуск прерван: ошибка конфигурации в обработчике %s", handler.__name__)
            raise
        except Exception as e:
            logger.error("Ошибка в обработчике %s: %s", handler.__name__, str(e))


async def run_shutdown_handlers(app: FastAPI):
    """
    Выполняет все зарегистрированные обработчики остановки приложения.

    Ошибка одного обработчика не мешает выполнению остальных.

    Args:
        app: Экземпляр FastAPI приложения
    """
    for handler in shutdown_handlers:
        try:
            logger.info("Запуск обработчика остановки: %s", handler.__name__)
            await handler(app)
            logger.debug("Обработчик остановки %s выполнен успешно", handler.__name__)
        except Exception as e:
            logger.error("Ошибка в обработчике остановки %s: %s", handler.__name__, str(e))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Контекстный менеджер жизненного цикла FastAPI приложения.

    Выполняет обработчики запуска при старте и обработчики остановки
    при завершении работы приложения.

    Args:
        app: Экземпляр FastAPI приложения

    Yields:
        None: Контроль передается приложению для обработки запросов
    """
    logger.info("Начало инициализации приложения")
    await run_startup_handlers(app)
    logger.info("Инициализация приложения завершена")

    yield

    logger.info("Начало завершения работы приложения")
    await run_shutdown_handlers(app)
    logger.info("Завершение работы приложения выполнено")


# Импортируем handlers после определения lifespan для регистрации (в конце файла)
# Порядок импорта важен - определяет порядок выполнения
from app.core.lifespan.cache import close_cache, initialize_cache  # noqa: E402, F401
