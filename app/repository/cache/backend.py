"""
Абстрактный интерфейс для кеш-бэкенда.

Определяет базовый контракт для реализаций кеширования:
- Redis (production, сетевой кеш)
- In-Memory (кеш в памяти процесса)
- None (отключенный кеш)

Бэкенд хранит уже сериализованные значения (bytes): сериализацией,
пространством имен ключей и TTL по умолчанию занимается CacheService.

Паттерны инвалидации только префиксные: "products:list*" совпадает с каждым
ключом, начинающимся с "products:list". Паттерн без завершающей "*" совпадает
только с идентичным ключом. Символы "*", "?" и "[" внутри префикса считаются
обычными символами, а не glob-синтаксисом.
"""

from abc import ABC, abstractmethod

WILDCARD = "*"


def parse_pattern(pattern: str) -> tuple[str, bool]:
    """
    Разбирает паттерн инвалидации.

    Args:
        pattern (str): Паттерн, например "products:list*".

    Returns:
        tuple[str, bool]: Префикс без маркера и признак префиксного совпадения.

    Example:
        >>> parse_pattern("products:list*")
        ('products:list', True)
        >>> parse_pattern("categories:list")
        ('categories:list', False)
    """
    if pattern.endswith(WILDCARD):
        return pattern[: -len(WILDCARD)], True
    return pattern, False


def matches_pattern(key: str, pattern: str) -> bool:
    """
    Проверяет, совпадает ли ключ с префиксным паттерном.

    Args:
        key (str): Полный ключ.
        pattern (str): Паттерн инвалидации.

    Returns:
        bool: True если ключ начинается с префикса (или равен ему без "*").
    """
    prefix, is_prefix = parse_pattern(pattern)
    return key.startswith(prefix) if is_prefix else key == prefix


class CacheBackend(ABC):
    """
    Абстрактный интерфейс для кеш-бэкенда.

    Все реализации асинхронные и безопасны при конкурентном вызове
    без внешней блокировки. Бэкенд выбирается один раз при старте
    и не меняется во время работы процесса.

    Attributes:
        name (str): Короткое имя бэкенда для логов и health-check.
    """

    name: str = "abstract"

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """
        Получить значение из кеша по ключу.

        Args:
            key (str): Полный ключ (с namespace).

        Returns:
            bytes | None: Сериализованное значение или None, если ключа нет или TTL истек.
        """

    @abstractmethod
    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        """
        Сохранить значение в кеш с TTL, заменив прежнее значение и срок жизни.

        Args:
            key (str): Полный ключ.
            value (bytes): Сериализованное значение.
            ttl (int): Время жизни в секундах (> 0).

        Returns:
            bool: True если значение сохранено.
        """

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Удалить значение из кеша.

        Returns:
            bool: True если ключ был удален.
        """

    @abstractmethod
    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Удалить все живые ключи, совпадающие с префиксным паттерном.

        Args:
            pattern (str): Паттерн, например "app:products:list*".

        Returns:
            int: Количество удаленных ключей.
        """

    @abstractmethod
    async def clear(self) -> None:
        """Очистить весь кеш бэкенда."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """
        Проверить наличие живого ключа.

        Returns:
            bool: True если ключ есть и TTL не истек.
        """

    async def health_check(self) -> bool:
        """
        Проверить доступность бэкенда.

        Returns:
            bool: True если бэкенд доступен.
        """
        return True

    async def close(self) -> None:
        """Освободить ресурсы бэкенда (соединения, фоновые задачи)."""
