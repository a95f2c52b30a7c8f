import logging

from app.core.settings import settings


class BaseService:
    """
    Базовый класс для сервисов приложения.

    Attributes:
        logger (logging.Logger): Логгер с именем класса сервиса.
        settings (Settings): Настройки приложения.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings
