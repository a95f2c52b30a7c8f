"""Тесты координатора инвалидации."""

import pytest

from app.repository.cache import CacheKeys
from app.services.invalidation import CacheInvalidator


@pytest.fixture
def invalidator(cache):
    return CacheInvalidator(cache)


class TestCacheInvalidator:
    async def test_invalidate_keys_and_patterns(self, invalidator, cache):
        await cache.set("product:id:1", {})
        await cache.set(CacheKeys.products_list(1, 10), [])
        await cache.set(CacheKeys.products_list(2, 10), [])
        await cache.set("category:id:1", {})

        removed = await invalidator.invalidate(
            keys=["product:id:1", "product:id:1"],
            patterns=[CacheKeys.products_list_pattern()],
        )

        assert removed == 3
        assert await cache.exists("category:id:1")

    async def test_after_commit_invalidates_after_success(self, invalidator, cache):
        await cache.set("product:id:1", {"stock": 1})
        order = []

        async def commit():
            order.append(("commit", await cache.exists("product:id:1")))
            return "saved"

        result = await invalidator.after_commit(commit, keys=["product:id:1"])

        assert result == "saved"
        assert order == [("commit", True)]
        assert not await cache.exists("product:id:1")

    async def test_failed_commit_leaves_cache_untouched(self, invalidator, cache):
        await cache.set("product:id:1", {"stock": 1})

        async def commit():
            raise RuntimeError("rollback")

        with pytest.raises(RuntimeError):
            await invalidator.after_commit(commit, keys=["product:id:1"])

        assert await cache.exists("product:id:1")
