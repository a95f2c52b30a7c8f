"""
Модуль paths.py — пути проекта и выбор файла окружения.

Определяет корень проекта (по pyproject.toml или .git) и решает, какой
.env-файл читать при старте: .env.test, .env.dev, указанный в ENV_FILE или .env.

Экспортируемые объекты:
- PathSettings: Класс с утилитами для работы с путями и окружением.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Соответствие значения ENVIRONMENT файлу окружения
ENVIRONMENT_FILES = {
    "test": ".env.test",
    "development": ".env.dev",
    "production": ".env",
}


class PathSettings:
    """
    Пути проекта и определение типа окружения.

    Атрибуты класса:
        PROJECT_ROOT (Path): Корневая директория проекта.
        APP_DIR (Path): Директория с исходным кодом приложения (app).
        LOGS_DIR (Path): Резервная директория для файлов логов.
    """

    @staticmethod
    def find_project_root() -> Path:
        """
        Находит корень проекта, поднимаясь от текущей директории.

        Returns:
            Path: Первая директория, содержащая pyproject.toml или .git,
            иначе текущая директория.
        """
        current_dir = Path.cwd()
        for parent in [current_dir, *current_dir.parents]:
            if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
                return parent

        logger.warning("Не удалось определить корень проекта, используем текущую директорию")
        return current_dir

    PROJECT_ROOT = find_project_root()

    APP_DIR = PROJECT_ROOT / "app"
    LOGS_DIR = PROJECT_ROOT / "logs"

    @staticmethod
    def get_env_file_and_type() -> tuple[Path, str]:
        """
        Определяет файл с переменными окружения и тип окружения.

        Порядок приоритета:
        - ENVIRONMENT (test/development/production);
        - ENV_FILE (произвольный путь, тип "custom");
        - .env.dev, если он существует;
        - .env.

        Returns:
            tuple[Path, str]: Путь к файлу окружения и тип окружения.
        """
        environment = (os.getenv("ENVIRONMENT") or "").lower()
        custom_env_file = os.getenv("ENV_FILE")

        if environment:
            env_type = environment if environment in ENVIRONMENT_FILES else "production"
            env_path = Path(ENVIRONMENT_FILES[env_type])
        elif custom_env_file:
            env_path = Path(custom_env_file)
            env_type = "custom"
        elif Path(ENVIRONMENT_FILES["development"]).exists():
            env_path = Path(ENVIRONMENT_FILES["development"])
            env_type = "development"
        else:
            env_path = Path(ENVIRONMENT_FILES["production"])
            env_type = "production"

        logger.info("Запуск в режиме: %s", env_type.upper())
        logger.info("Конфигурация: %s", env_path)

        return env_path, env_type
