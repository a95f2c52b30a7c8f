"""
Базовые классы для подключений к внешним сервисам.

- BaseClient: Клиент, который создает и закрывает подключение
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class BaseClient(ABC, Generic[T]):
    """
    Базовый клиент подключения.

    Attributes:
        logger (logging.Logger): Логгер для записи событий подключения
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def connect(self) -> T:
        """Создает подключение и возвращает клиента."""

    @abstractmethod
    async def close(self) -> None:
        """Закрывает подключение."""
