"""Тесты сервисов каталога: чтение через кеш и инвалидация после записи."""

import uuid
from decimal import Decimal

import pytest

from app.core.exceptions import EntityNotFoundError
from app.repository.cache import CacheKeys
from app.schemas import (
    CategoryCreateSchema,
    CategoryUpdateSchema,
    ProductCreateSchema,
    ProductUpdateSchema,
    UserUpdateSchema,
)
from app.services.v1 import CategoryService, ProductService, UserService

from .fakes import FakeCategoryRepository, FakeProductRepository, FakeUserRepository


@pytest.fixture
def category_repo():
    return FakeCategoryRepository()


@pytest.fixture
def product_repo(category_repo):
    return FakeProductRepository(category_repo)


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def product_service(product_repo, category_repo, cache):
    return ProductService(product_repo, category_repo, cache)


@pytest.fixture
def category_service(category_repo, cache):
    return CategoryService(category_repo, cache)


@pytest.fixture
def user_service(user_repo, cache):
    return UserService(user_repo, cache)


@pytest.fixture
async def category(category_service):
    return await category_service.create_category(CategoryCreateSchema(name="Электроника"))


@pytest.fixture
async def product(product_service, category):
    return await product_service.create_product(
        ProductCreateSchema(name="Ноутбук", price=Decimal("999.99"), stock=5, category_id=category.id)
    )


class TestProductService:
    async def test_get_product_is_cached(self, product_service, product_repo, product):
        first = await product_service.get_product(product.id)
        second = await product_service.get_product(product.id)

        assert first == second
        assert first.category_name == "Электроника"
        assert product_repo.calls["get_by_id"] == 1

    async def test_product_ttl_preset(self, product_service, product, cache, clock):
        await product_service.get_product(product.id)

        clock.advance(15 * 60)

        assert not await cache.exists(CacheKeys.product_by_id(product.id))

    async def test_missing_product_is_not_cached(self, product_service, product_repo):
        missing = uuid.uuid4()

        for _ in range(2):
            with pytest.raises(EntityNotFoundError):
                await product_service.get_product(missing)

        assert product_repo.calls["get_by_id"] == 2

    async def test_create_requires_category(self, product_service):
        with pytest.raises(EntityNotFoundError):
            await product_service.create_product(
                ProductCreateSchema(name="X", price=Decimal("1"), category_id=uuid.uuid4())
            )

    async def test_create_fills_category_name(self, product):
        assert product.category_name == "Электроника"

    async def test_list_products_cached_and_invalidated_by_create(
        self, product_service, product_repo, product, category
    ):
        page = await product_service.list_products(page=1, page_size=10)
        await product_service.list_products(page=1, page_size=10)
        assert page.total == 1
        assert product_repo.calls["list_page"] == 1

        await product_service.create_product(
            ProductCreateSchema(name="Мышь", price=Decimal("10"), category_id=category.id)
        )
        page = await product_service.list_products(page=1, page_size=10)

        assert page.total == 2
        assert product_repo.calls["list_page"] == 2

    async def test_update_invalidates_product_and_lists(self, product_service, product, cache):
        await product_service.get_product(product.id)
        await product_service.list_products(page=1, page_size=10)

        await product_service.update_product(product.id, ProductUpdateSchema(stock=0))

        assert not await cache.exists(CacheKeys.product_by_id(product.id))
        assert not await cache.exists(CacheKeys.products_list(1, 10))
        assert (await product_service.get_product(product.id)).stock == 0

    async def test_failed_commit_keeps_cache(self, product_service, product_repo, product, cache):
        await product_service.get_product(product.id)
        product_repo.fail_commit = True

        with pytest.raises(RuntimeError):
            await product_service.update_product(product.id, ProductUpdateSchema(stock=0))

        assert await cache.exists(CacheKeys.product_by_id(product.id))

    async def test_update_missing_product(self, product_service):
        with pytest.raises(EntityNotFoundError):
            await product_service.update_product(uuid.uuid4(), ProductUpdateSchema(stock=1))

    async def test_delete_product(self, product_service, product, cache):
        await product_service.get_product(product.id)

        await product_service.delete_product(product.id)

        assert not await cache.exists(CacheKeys.product_by_id(product.id))
        with pytest.raises(EntityNotFoundError):
            await product_service.get_product(product.id)

    @pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0), (1, 101)])
    async def test_invalid_pagination(self, product_service, page, page_size):
        with pytest.raises(ValueError):
            await product_service.list_products(page=page, page_size=page_size)


class TestCategoryService:
    async def test_list_categories_cached(self, category_service, category_repo, category):
        assert [c.name for c in await category_service.list_categories()] == ["Электроника"]
        await category_service.list_categories()

        assert category_repo.calls["list_all"] == 1

    async def test_get_category(self, category_service, category):
        assert (await category_service.get_category(category.id)).name == "Электроника"

        with pytest.raises(EntityNotFoundError):
            await category_service.get_category(uuid.uuid4())

    async def test_rename_invalidates_products(self, category_service, product_service, product, category, cache):
        await product_service.get_product(product.id)
        await product_service.list_products()
        await category_service.list_categories()

        await category_service.update_category(category.id, CategoryUpdateSchema(name="Гаджеты"))

        assert not await cache.exists(CacheKeys.categories_list())
        assert not await cache.exists(CacheKeys.products_list(1, 10))
        assert (await product_service.get_product(product.id)).category_name == "Гаджеты"

    async def test_delete_category(self, category_service, category):
        await category_service.get_category(category.id)

        await category_service.delete_category(category.id)

        with pytest.raises(EntityNotFoundError):
            await category_service.get_category(category.id)
        with pytest.raises(EntityNotFoundError):
            await category_service.delete_category(category.id)


class TestUserService:
    async def test_get_user_by_email_is_case_insensitive(self, user_service, user_repo, cache):
        user_repo.add("ivan@example.com", first_name="Иван")

        first = await user_service.get_user_by_email("Ivan@Example.com")
        second = await user_service.get_user_by_email("IVAN@EXAMPLE.COM")

        assert first == second
        assert user_repo.calls["get_by_email"] == 1
        assert await cache.exists("user:email:ivan@example.com")

    async def test_unknown_email_with_separator_is_not_found(self, user_service, user_repo, cache):
        with pytest.raises(EntityNotFoundError):
            await user_service.get_user_by_email('"A:B"@Example.com')

        assert user_repo.calls["get_by_email"] == 1
        assert not await cache.exists('user:email:"a:b"@example.com')

    async def test_get_user(self, user_service, user_repo):
        user = user_repo.add("anna@example.com")

        assert (await user_service.get_user(user.id)).email == "anna@example.com"
        with pytest.raises(EntityNotFoundError):
            await user_service.get_user(uuid.uuid4())

    async def test_email_change_invalidates_old_and_new_keys(self, user_service, user_repo, cache):
        user = user_repo.add("old@example.com")
        await user_service.get_user(user.id)
        await user_service.get_user_by_email("old@example.com")

        await user_service.update_user(user.id, UserUpdateSchema(email="new@example.com"))

        assert not await cache.exists(CacheKeys.user_by_id(user.id))
        assert not await cache.exists(CacheKeys.user_by_email("old@example.com"))
        with pytest.raises(EntityNotFoundError):
            await user_service.get_user_by_email("old@example.com")
        assert (await user_service.get_user_by_email("new@example.com")).id == user.id

    async def test_update_missing_user(self, user_service):
        with pytest.raises(EntityNotFoundError):
            await user_service.update_user(uuid.uuid4(), UserUpdateSchema(first_name="X"))
