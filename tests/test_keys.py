"""Тесты построения ключей кеша."""

import uuid

import pytest

from app.repository.cache import CacheKeys, build_key, matches_pattern, parse_pattern


class TestCacheKeys:
    def test_entity_key_shapes(self):
        product_id = uuid.UUID("3f2c7a4e-0000-4000-8000-000000000001")

        assert CacheKeys.user_by_id(42) == "user:id:42"
        assert CacheKeys.product_by_id(product_id) == f"product:id:{product_id}"
        assert CacheKeys.category_by_id(7) == "category:id:7"
        assert CacheKeys.products_list(2, 20) == "products:list:page:2:size:20"
        assert CacheKeys.categories_list() == "categories:list"

    def test_email_is_lowercased(self):
        assert CacheKeys.user_by_email("John.Doe@Example.COM") == "user:email:john.doe@example.com"
        assert CacheKeys.user_by_email("A@B.IO") == CacheKeys.user_by_email("a@b.io")

    def test_email_is_not_trimmed(self):
        assert CacheKeys.user_by_email(" A@b.io") == "user:email: a@b.io"

    def test_email_with_separator_is_kept_as_is(self):
        assert CacheKeys.user_by_email('"A:B"@Example.com') == 'user:email:"a:b"@example.com'

    def test_collection_patterns(self):
        assert CacheKeys.products_list_pattern() == "products:list*"
        assert CacheKeys.categories_list_pattern() == "categories:list*"
        assert CacheKeys.all_products_pattern() == "product:*"

    def test_all_products_pattern_does_not_touch_lists(self):
        assert not matches_pattern(CacheKeys.products_list(1, 10), CacheKeys.all_products_pattern())


class TestBuildKey:
    def test_attribute_order_does_not_matter(self):
        assert build_key("products", "list", page=1, size=10) == build_key("products", "list", size=10, page=1)

    def test_positional_components(self):
        assert build_key("user", "id", 5) == "user:id:5"

    def test_empty_value_rejected(self):
        with pytest.raises(ValueError):
            build_key("user", "id", "")

    def test_values_with_separator_pass_through(self):
        assert build_key("user", "id", "a:b") == "user:id:a:b"
        assert build_key("products", "list", page="1:x") == "products:list:page:1:x"

    @pytest.mark.parametrize(
        "kind, operation, attrs",
        [("us:er", "id", {}), ("user", "by:id", {}), ("products", "list", {"pa:ge": 1})],
    )
    def test_rejects_separator_in_structural_components(self, kind, operation, attrs):
        with pytest.raises(ValueError):
            build_key(kind, operation, **attrs)


class TestPatterns:
    def test_parse_prefix_pattern(self):
        assert parse_pattern("products:list*") == ("products:list", True)
        assert parse_pattern("categories:list") == ("categories:list", False)

    def test_prefix_match(self):
        assert matches_pattern("product:id:123", "product:id:123*")
        assert matches_pattern("product:id:1234", "product:id:123*")
        assert not matches_pattern("product:id:12", "product:id:123*")

    def test_pattern_without_wildcard_is_exact(self):
        assert matches_pattern("categories:list", "categories:list")
        assert not matches_pattern("categories:list:extra", "categories:list")

    def test_glob_characters_are_literal(self):
        assert matches_pattern("weird:[a]?", "weird:[a]*")
        assert not matches_pattern("weird:b?", "weird:[a]*")
