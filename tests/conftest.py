"""
Фикстуры тестов слоя кеширования.

Окружение фиксируется до импорта приложения: настройки читаются один раз
при импорте app.core.settings.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ["CACHE_ENABLED"] = "true"
os.environ["CACHE_BACKEND"] = "memory"
os.environ.pop("CACHE_KEY_PREFIX", None)

import pytest  # noqa: E402

from app.repository.cache import InMemoryCacheBackend  # noqa: E402
from app.services.cache import CacheService  # noqa: E402

from .fakes import FakeClock, FakeRedis  # noqa: E402


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_backend(clock: FakeClock) -> InMemoryCacheBackend:
    return InMemoryCacheBackend(clock=clock)


@pytest.fixture
def cache(memory_backend: InMemoryCacheBackend) -> CacheService:
    """CacheService без префикса поверх in-memory бэкенда с управляемыми часами."""
    return CacheService(memory_backend, default_ttl=60)


@pytest.fixture
def prefixed_cache(memory_backend: InMemoryCacheBackend) -> CacheService:
    return CacheService(memory_backend, key_prefix="app", default_ttl=60)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
