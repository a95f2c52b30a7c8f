"""Тесты Redis бэкенда кеша (без реального сервера)."""

import zlib
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from app.core.connections.cache import RedisClient
from app.core.settings import CacheSettings
from app.repository.cache import RedisCacheBackend
from app.repository.cache.redis import escape_glob


@pytest.fixture
def backend(fake_redis):
    return RedisCacheBackend(redis=fake_redis, scan_batch_size=2)


@pytest.fixture
def broken_redis():
    redis = AsyncMock()
    error = RedisConnectionError("connection refused")
    for command in ("get", "set", "delete", "unlink", "exists", "flushdb", "ping"):
        getattr(redis, command).side_effect = error
    return redis


class TestRedisBackend:
    async def test_set_uses_native_ttl(self, backend, fake_redis):
        assert await backend.set("product:id:1", b"{}", ttl=900)

        assert fake_redis.data["product:id:1"] == b"{}"
        assert fake_redis.ttls["product:id:1"] == 900

    async def test_get_and_exists(self, backend):
        await backend.set("k", b"v", ttl=10)

        assert await backend.get("k") == b"v"
        assert await backend.exists("k")
        assert await backend.get("missing") is None
        assert not await backend.exists("missing")

    async def test_delete(self, backend):
        await backend.set("k", b"v", ttl=10)

        assert await backend.delete("k")
        assert not await backend.delete("k")

    async def test_non_positive_ttl_rejected(self, backend):
        with pytest.raises(ValueError):
            await backend.set("k", b"v", ttl=0)

    async def test_invalidate_pattern_scans_and_unlinks_in_batches(self, backend, fake_redis):
        for n in range(5):
            await backend.set(f"products:list:page:{n}:size:10", b"[]", ttl=10)
        await backend.set("product:id:1", b"{}", ttl=10)

        assert await backend.invalidate_pattern("products:list*") == 5

        assert set(fake_redis.data) == {"product:id:1"}
        assert [len(call) for call in fake_redis.unlink_calls] == [2, 2, 1]
        assert fake_redis.scan_matches == ["products:list*"]

    async def test_prefix_scenario(self, backend, fake_redis):
        for key in ("product:id:123", "product:id:1234", "product:id:12"):
            await backend.set(key, b"{}", ttl=10)

        assert await backend.invalidate_pattern("product:id:123*") == 2
        assert set(fake_redis.data) == {"product:id:12"}

    async def test_pattern_without_wildcard_deletes_exact_key(self, backend, fake_redis):
        await backend.set("categories:list", b"[]", ttl=10)
        await backend.set("categories:list:x", b"[]", ttl=10)

        assert await backend.invalidate_pattern("categories:list") == 1
        assert set(fake_redis.data) == {"categories:list:x"}
        assert fake_redis.scan_matches == []

    async def test_glob_characters_escaped(self, backend, fake_redis):
        await backend.set("tag:[a]:1", b"1", ttl=10)
        await backend.set("tag:a:1", b"1", ttl=10)

        assert await backend.invalidate_pattern("tag:[a]*") == 1
        assert fake_redis.scan_matches == ["tag:\\[a\\]*"]
        assert set(fake_redis.data) == {"tag:a:1"}

    async def test_clear_flushes_db(self, backend, fake_redis):
        await backend.set("a", b"1", ttl=10)

        await backend.clear()

        assert fake_redis.data == {}

    async def test_health_check(self, backend):
        assert await backend.health_check()


class TestRedisCompression:
    async def test_values_compressed_on_the_wire(self, fake_redis):
        backend = RedisCacheBackend(redis=fake_redis, compress=True)
        payload = b'{"name": "' + b"x" * 200 + b'"}'

        await backend.set("k", payload, ttl=10)

        assert zlib.decompress(fake_redis.data["k"]) == payload
        assert await backend.get("k") == payload

    async def test_corrupt_compressed_value_is_a_miss(self, fake_redis):
        backend = RedisCacheBackend(redis=fake_redis, compress=True)
        fake_redis.data["k"] = b"not zlib"

        assert await backend.get("k") is None
        assert "k" not in fake_redis.data


class TestRedisFailures:
    async def test_failures_degrade_to_safe_results(self, broken_redis):
        backend = RedisCacheBackend(redis=broken_redis)

        assert await backend.get("k") is None
        assert await backend.set("k", b"v", ttl=10) is False
        assert await backend.delete("k") is False
        assert await backend.exists("k") is False
        assert await backend.health_check() is False
        await backend.clear()

    async def test_scan_failure_returns_partial_count(self, fake_redis):
        backend = RedisCacheBackend(redis=fake_redis, scan_batch_size=1)
        for n in range(3):
            await backend.set(f"p:{n}", b"1", ttl=10)

        original_unlink = fake_redis.unlink
        calls = 0

        async def flaky_unlink(*keys):
            nonlocal calls
            calls += 1
            if calls > 1:
                raise RedisTimeoutError("timeout")
            return await original_unlink(*keys)

        fake_redis.unlink = flaky_unlink

        assert await backend.invalidate_pattern("p:*") == 1

    async def test_connection_error_on_connect_is_a_miss(self):
        client = AsyncMock(spec=RedisClient)
        client.connect.side_effect = OSError("unreachable")
        backend = RedisCacheBackend(client=client)

        assert await backend.get("k") is None
        assert await backend.set("k", b"v", ttl=5) is False


class TestRedisLifecycle:
    def test_requires_client_or_redis(self):
        with pytest.raises(ValueError):
            RedisCacheBackend()

    async def test_close_closes_owned_client(self):
        client = AsyncMock(spec=RedisClient)
        backend = RedisCacheBackend(client=client)

        await backend.close()

        client.close.assert_awaited_once()

    async def test_redis_client_connects_lazily(self):
        settings = CacheSettings(
            _env_file=None,
            CACHE_BACKEND="redis",
            CACHE_REDIS_URL="redis://localhost:6399/0",
        )
        client = RedisClient(settings)

        redis = await client.connect()

        assert await client.connect() is redis
        await client.close()


def test_escape_glob():
    assert escape_glob("a*b?c[d]e\\") == "a\\*b\\?c\\[d\\]e\\\\"
