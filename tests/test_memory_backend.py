"""Тесты in-memory бэкенда кеша."""

import asyncio
import random

import pytest

from app.repository.cache import InMemoryCacheBackend


class TestInMemoryBasics:
    async def test_set_then_get(self, memory_backend):
        assert await memory_backend.set("product:id:1", b'{"id": 1}', ttl=60)

        assert await memory_backend.get("product:id:1") == b'{"id": 1}'
        assert await memory_backend.exists("product:id:1")

    async def test_missing_key(self, memory_backend):
        assert await memory_backend.get("nope") is None
        assert not await memory_backend.exists("nope")
        assert not await memory_backend.delete("nope")

    async def test_set_overwrites_value(self, memory_backend):
        await memory_backend.set("k", b"1", ttl=60)
        await memory_backend.set("k", b"2", ttl=60)

        assert await memory_backend.get("k") == b"2"
        assert memory_backend.size == 1

    async def test_non_positive_ttl_rejected(self, memory_backend):
        with pytest.raises(ValueError):
            await memory_backend.set("k", b"1", ttl=0)

    async def test_delete_removes_from_registry(self, memory_backend):
        await memory_backend.set("k", b"1", ttl=60)

        assert await memory_backend.delete("k")
        assert memory_backend.registered_keys() == set()

    async def test_clear(self, memory_backend):
        await memory_backend.set("a", b"1", ttl=60)
        await memory_backend.set("b", b"2", ttl=60)

        await memory_backend.clear()

        assert memory_backend.size == 0
        assert memory_backend.registered_keys() == set()


class TestInMemoryExpiry:
    async def test_entry_visible_until_expiry(self, memory_backend, clock):
        await memory_backend.set("k", b"v", ttl=10)

        clock.advance(9.9)
        assert await memory_backend.get("k") == b"v"

        clock.advance(0.1)
        assert await memory_backend.get("k") is None
        assert not await memory_backend.exists("k")

    async def test_expired_entry_is_evicted_on_access(self, memory_backend, clock):
        await memory_backend.set("k", b"v", ttl=1)
        clock.advance(2)

        await memory_backend.get("k")

        assert memory_backend.size == 0
        assert "k" not in memory_backend.registered_keys()

    async def test_set_refreshes_ttl(self, memory_backend, clock):
        await memory_backend.set("k", b"v1", ttl=10)
        clock.advance(8)
        await memory_backend.set("k", b"v2", ttl=10)
        clock.advance(8)

        assert await memory_backend.get("k") == b"v2"

    async def test_purge_expired(self, memory_backend, clock):
        await memory_backend.set("short", b"1", ttl=1)
        await memory_backend.set("long", b"2", ttl=100)
        clock.advance(5)

        assert memory_backend.purge_expired() == 1
        assert memory_backend.registered_keys() == {"long"}

    async def test_expired_keys_not_counted_by_invalidation(self, memory_backend, clock):
        await memory_backend.set("products:list:page:1:size:10", b"[]", ttl=1)
        clock.advance(5)
        memory_backend.purge_expired()

        assert await memory_backend.invalidate_pattern("products:list*") == 0

    async def test_unswept_expired_keys_removed_but_not_counted(self, memory_backend, clock):
        await memory_backend.set("products:list:page:1:size:10", b"[]", ttl=1)
        await memory_backend.set("products:list:page:2:size:10", b"[]", ttl=100)
        clock.advance(5)

        assert await memory_backend.invalidate_pattern("products:list*") == 1
        assert memory_backend.registered_keys() == set()

    async def test_background_sweeper(self, clock):
        backend = InMemoryCacheBackend(clock=clock, sweep_interval=0.01)
        await backend.set("k", b"v", ttl=1)
        clock.advance(5)

        backend.start()
        for _ in range(50):
            if backend.size == 0:
                break
            await asyncio.sleep(0.01)
        await backend.close()

        assert backend.size == 0

    async def test_close_without_sweeper(self, memory_backend):
        memory_backend.start()
        await memory_backend.close()


class TestInMemoryInvalidation:
    async def test_prefix_scenario(self, memory_backend):
        for key in ("product:id:123", "product:id:1234", "product:id:12"):
            await memory_backend.set(key, b"{}", ttl=60)

        assert await memory_backend.invalidate_pattern("product:id:123*") == 2
        assert memory_backend.registered_keys() == {"product:id:12"}

    async def test_collection_scenario(self, memory_backend):
        keys = [
            "products:list:page:1:size:10",
            "products:list:page:2:size:10",
            "product:id:1",
            "category:id:1",
        ]
        for key in keys:
            await memory_backend.set(key, b"{}", ttl=60)

        assert await memory_backend.invalidate_pattern("products:list*") == 2
        assert memory_backend.registered_keys() == {"product:id:1", "category:id:1"}

    async def test_pattern_without_wildcard_removes_only_exact_key(self, memory_backend):
        await memory_backend.set("categories:list", b"[]", ttl=60)
        await memory_backend.set("categories:list:old", b"[]", ttl=60)

        assert await memory_backend.invalidate_pattern("categories:list") == 1
        assert memory_backend.registered_keys() == {"categories:list:old"}

    @pytest.mark.parametrize("seed", range(5))
    async def test_prefix_removal_over_random_keys(self, memory_backend, seed):
        rng = random.Random(seed)
        alphabet = "ab:*?["
        keys = {"".join(rng.choice(alphabet) for _ in range(rng.randint(1, 6))) for _ in range(60)}
        prefix = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 2)))
        for key in keys:
            await memory_backend.set(key, b"1", ttl=60)

        removed = await memory_backend.invalidate_pattern(f"{prefix}*")

        expected_left = {key for key in keys if not key.startswith(prefix)}
        assert removed == len(keys) - len(expected_left)
        assert memory_backend.registered_keys() == expected_left
        for key in expected_left:
            assert await memory_backend.exists(key)


class TestInMemoryConcurrency:
    async def test_concurrent_writes_keep_registry_consistent(self, memory_backend):
        async def writer(n: int):
            await memory_backend.set(f"products:list:page:{n}:size:10", b"[]", ttl=60)
            await asyncio.sleep(0)
            await memory_backend.set(f"product:id:{n}", b"{}", ttl=60)

        await asyncio.gather(
            *(writer(n) for n in range(100)),
            memory_backend.invalidate_pattern("products:list*"),
        )
        await memory_backend.invalidate_pattern("products:list*")

        assert memory_backend.registered_keys() == {f"product:id:{n}" for n in range(100)}
        assert memory_backend.size == 100

    def test_thread_safety(self, memory_backend):
        from concurrent.futures import ThreadPoolExecutor

        def work(n: int):
            asyncio.run(memory_backend.set(f"k:{n}", b"v", ttl=60))
            if n % 2:
                asyncio.run(memory_backend.delete(f"k:{n}"))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(work, range(200)))

        assert memory_backend.registered_keys() == {f"k:{n}" for n in range(0, 200, 2)}
        assert memory_backend.size == 100
