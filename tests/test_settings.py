"""Тесты настроек кеша и фабрики бэкендов."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.core.exceptions import CacheConfigurationError
from app.core.settings import CacheBackendType, CacheSettings
from app.repository.cache import (
    InMemoryCacheBackend,
    NoCacheBackend,
    RedisCacheBackend,
    build_cache_backend,
)


def make_settings(**values) -> CacheSettings:
    return CacheSettings(_env_file=None, **values)


class TestCacheSettings:
    def test_defaults(self):
        settings = make_settings()

        assert settings.CACHE_BACKEND is CacheBackendType.MEMORY
        assert settings.default_ttl == 30 * 60
        assert settings.user_ttl == timedelta(minutes=30)
        assert settings.product_ttl == timedelta(minutes=15)
        assert settings.category_ttl == timedelta(minutes=60)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Memory", CacheBackendType.MEMORY),
            ("in-process", CacheBackendType.MEMORY),
            ("REDIS", CacheBackendType.REDIS),
            ("networked", CacheBackendType.REDIS),
            ("disabled", CacheBackendType.NONE),
        ],
    )
    def test_backend_aliases(self, raw, expected):
        settings = make_settings(CACHE_BACKEND=raw, CACHE_REDIS_URL="redis://localhost:6379/0")

        assert settings.CACHE_BACKEND is expected

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(CACHE_BACKEND="memcached")

    def test_redis_requires_url(self):
        with pytest.raises(ValidationError):
            make_settings(CACHE_BACKEND="redis")

    def test_redis_url_not_required_when_disabled(self):
        settings = make_settings(CACHE_BACKEND="redis", CACHE_ENABLED=False)

        assert settings.effective_backend is CacheBackendType.NONE

    def test_malformed_redis_url_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(CACHE_BACKEND="redis", CACHE_REDIS_URL="http://localhost")

    @pytest.mark.parametrize("minutes", [0, -1])
    def test_non_positive_ttl_rejected(self, minutes):
        with pytest.raises(ValidationError):
            make_settings(CACHE_DEFAULT_EXPIRATION_MINUTES=minutes)

    def test_key_prefix_normalization(self):
        assert make_settings(CACHE_KEY_PREFIX="  ").CACHE_KEY_PREFIX is None
        assert make_settings(CACHE_KEY_PREFIX="catalog").service_params == {
            "key_prefix": "catalog",
            "default_ttl": 1800,
        }
        with pytest.raises(ValidationError):
            make_settings(CACHE_KEY_PREFIX="a:b")

    def test_redis_params(self):
        settings = make_settings(
            CACHE_BACKEND="redis",
            CACHE_REDIS_URL="redis://cache:6379/1",
            CACHE_REDIS_POOL_SIZE=20,
        )

        params = settings.redis_params
        assert params["url"] == "redis://cache:6379/1"
        assert params["max_connections"] == 20

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CACHE_BACKEND", "none")
        monkeypatch.setenv("CACHE_DEFAULT_EXPIRATION_MINUTES", "5")

        settings = CacheSettings(_env_file=None)

        assert settings.CACHE_BACKEND is CacheBackendType.NONE
        assert settings.default_ttl == 300


class TestBuildCacheBackend:
    def test_memory(self):
        backend = build_cache_backend(make_settings(CACHE_BACKEND="memory"))

        assert isinstance(backend, InMemoryCacheBackend)

    def test_redis_does_not_connect_on_build(self):
        backend = build_cache_backend(
            make_settings(CACHE_BACKEND="redis", CACHE_REDIS_URL="redis://localhost:6399/0", CACHE_ENABLE_COMPRESSION=True)
        )

        assert isinstance(backend, RedisCacheBackend)
        assert backend.name == "redis"

    @pytest.mark.parametrize(
        "values",
        [
            {"CACHE_BACKEND": "none"},
            {"CACHE_BACKEND": "memory", "CACHE_ENABLED": False},
        ],
    )
    def test_disabled(self, values):
        assert isinstance(build_cache_backend(make_settings(**values)), NoCacheBackend)

    def test_redis_without_url_is_configuration_error(self):
        settings = make_settings(CACHE_BACKEND="memory")
        settings.CACHE_BACKEND = CacheBackendType.REDIS

        with pytest.raises(CacheConfigurationError):
            build_cache_backend(settings)
