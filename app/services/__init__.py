from .base import BaseService
from .cache import CacheService
from .invalidation import CacheInvalidator

__all__ = [
    "BaseService",
    "CacheService",
    "CacheInvalidator",
]
