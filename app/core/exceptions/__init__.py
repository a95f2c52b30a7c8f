from .base import BaseAPIException
from .cache import CacheConfigurationError, CacheError, CacheSerializationError
from .common import EntityNotFoundError, NotFoundError, ServiceUnavailableError
from .handlers import register_exception_handlers

__all__ = [
    # Base
    "BaseAPIException",
    # Common
    "NotFoundError",
    "EntityNotFoundError",
    "ServiceUnavailableError",
    # Cache
    "CacheError",
    "CacheConfigurationError",
    "CacheSerializationError",
    # Handlers
    "register_exception_handlers",
]
