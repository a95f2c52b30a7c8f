"""
Исключения слоя кеширования.

Ошибки доступности бэкенда (Redis недоступен, таймаут) сюда не относятся:
они логируются и превращаются в промах кеша, не доходя до вызывающего кода.
Исключения ниже описывают ошибки программиста или конфигурации, которые
должны быть видны сразу.
"""


class CacheError(Exception):
    """Базовое исключение слоя кеширования."""


class CacheConfigurationError(CacheError):
    """
    Некорректная конфигурация кеша.

    Поднимается при старте процесса (неизвестный бэкенд, отсутствует
    строка подключения), никогда не во время обработки запроса.
    """


class CacheSerializationError(CacheError):
    """
    Значение нельзя сериализовать для сохранения в кеш.

    Поднимается из CacheService.set и не подавляется: это локальная
    ошибка вызывающего кода, а не сбой инфраструктуры.

    Attributes:
        key (str): Ключ, под которым пытались сохранить значение.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Не удалось сериализовать значение для ключа {key!r}: {reason}")
