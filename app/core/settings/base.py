"""Конфигурация приложения."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.settings.cache import CacheSettings
from app.core.settings.logging import LoggingSettings
from app.core.settings.paths import PathSettings

env_file_path, app_env = PathSettings.get_env_file_and_type()


class Settings(BaseSettings):
    """Настройки приложения из переменных окружения."""

    # Виртуальное окружение приложения
    app_env: str = app_env

    logging: LoggingSettings = LoggingSettings()
    cache: CacheSettings = CacheSettings()

    # App
    TITLE: str = "Catalog Cache API"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Слой доступа к данным с кешированием (cache-aside)"
    DEBUG: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8010

    # Временная зона для временных меток ошибок
    TIMEZONE: str = "Europe/Moscow"

    @property
    def app_params(self) -> dict:
        """
        Параметры для инициализации FastAPI приложения.

        Returns:
            Dict с настройками FastAPI
        """
        # Ленивый импорт lifespan для избежания circular import
        from app.core.lifespan import lifespan

        return {
            "title": self.TITLE,
            "description": self.DESCRIPTION,
            "version": self.VERSION,
            "swagger_ui_parameters": {"defaultModelsExpandDepth": -1},
            "root_path": "",
            "lifespan": lifespan,
        }

    @property
    def uvicorn_params(self) -> dict:
        """
        Параметры для запуска uvicorn сервера.

        Returns:
            Dict с настройками uvicorn
        """
        return {
            "host": self.HOST,
            "port": self.PORT,
            "proxy_headers": True,
            "forwarded_allow_ips": "*",
            "log_level": "debug" if self.DEBUG else "info",
        }

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )
