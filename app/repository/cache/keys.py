"""
Построение ключей кеша. Единое место для формата ключей.

Форматы ключей являются внешним контрактом: любой компонент, строящий ключи
самостоятельно, должен воспроизводить их символ в символ.

    user:id:{id}
    user:email:{email в нижнем регистре}
    product:id:{id}
    products:list:page:{page}:size:{page_size}
    category:id:{id}
    categories:list

Разделитель ":" запрещен в типе сущности, операции и именах атрибутов.
Значения (id, email, номер страницы) подставляются как есть: email
вида "a:b"@example.com дает ключ user:email:"a:b"@example.com.
"""

from typing import Any

KEY_SEP = ":"

USER_PREFIX = "user"
PRODUCT_PREFIX = "product"
PRODUCTS_LIST_PREFIX = "products:list"
CATEGORY_PREFIX = "category"
CATEGORIES_LIST_PREFIX = "categories:list"


def _value(value: Any, name: str) -> str:
    text = str(value)
    if not text:
        raise ValueError(f"Компонент ключа {name!r} не может быть пустым")
    return text


def _component(value: Any, name: str) -> str:
    """
    Приводит структурный компонент ключа к строке и проверяет отсутствие разделителя.

    Raises:
        ValueError: Если значение пустое или содержит KEY_SEP.
    """
    text = _value(value, name)
    if KEY_SEP in text:
        raise ValueError(f"Компонент ключа {name!r} не должен содержать разделитель {KEY_SEP!r}")
    return text


def build_key(kind: str, operation: str, *args: Any, **attrs: Any) -> str:
    """
    Построить ключ кеша по шаблону.

    Именованные атрибуты сортируются по имени, поэтому порядок их
    передачи не влияет на результат.

    Args:
        kind (str): Тип сущности, например "product".
        operation (str): Операция или поле поиска, например "id".
        *args: Позиционные компоненты ключа.
        **attrs: Именованные компоненты, добавляются как "имя:значение".

    Returns:
        str: Сгенерированный ключ кеша.

    Example:
        >>> build_key("products", "list", size=10, page=1)
        'products:list:page:1:size:10'
    """
    parts = [_component(kind, "kind"), _component(operation, "operation")]
    parts.extend(_value(arg, "arg") for arg in args)

    for name in sorted(attrs):
        parts.append(_component(name, "attr"))
        parts.append(_value(attrs[name], name))

    return KEY_SEP.join(parts)


class CacheKeys:
    """
    Ключи кеша для сущностей каталога.

    Example:
        >>> CacheKeys.user_by_email("John@Example.COM")
        'user:email:john@example.com'
    """

    @staticmethod
    def user_by_id(user_id: Any) -> str:
        return build_key(USER_PREFIX, "id", user_id)

    @staticmethod
    def user_by_email(email: str) -> str:
        """Email нечувствителен к регистру: ключ всегда в нижнем регистре."""
        return build_key(USER_PREFIX, "email", email.lower())

    @staticmethod
    def product_by_id(product_id: Any) -> str:
        return build_key(PRODUCT_PREFIX, "id", product_id)

    @staticmethod
    def products_list(page: int, page_size: int) -> str:
        return build_key("products", "list", page=page, size=page_size)

    @staticmethod
    def category_by_id(category_id: Any) -> str:
        return build_key(CATEGORY_PREFIX, "id", category_id)

    @staticmethod
    def categories_list() -> str:
        return CATEGORIES_LIST_PREFIX

    @staticmethod
    def pattern(prefix: str) -> str:
        """Префиксный паттерн для инвалидации: "products:list" -> "products:list*"."""
        return f"{prefix}*"

    @classmethod
    def products_list_pattern(cls) -> str:
        return cls.pattern(PRODUCTS_LIST_PREFIX)

    @classmethod
    def categories_list_pattern(cls) -> str:
        return cls.pattern(CATEGORIES_LIST_PREFIX)

    @classmethod
    def all_products_pattern(cls) -> str:
        return cls.pattern(f"{PRODUCT_PREFIX}{KEY_SEP}")
