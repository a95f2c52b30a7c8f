"""
Контракты репозиториев каталога.

Хранилище (ORM, транзакции, построение запросов) находится вне этого
сервиса. Сервисы каталога зависят только от протоколов ниже.

Методы записи (create/update/delete) сохраняют изменения и фиксируют
транзакцию до возврата: возврат без исключения означает, что запись
зафиксирована и кеш можно инвалидировать.
"""

import uuid
from typing import Protocol

from app.schemas import (
    CategoryCreateSchema,
    CategorySchema,
    CategoryUpdateSchema,
    ProductCreateSchema,
    ProductSchema,
    ProductUpdateSchema,
    UserSchema,
    UserUpdateSchema,
)


class ProductRepository(Protocol):
    """Хранилище товаров."""

    async def get_by_id(self, product_id: uuid.UUID) -> ProductSchema | None: ...

    async def list_page(self, offset: int, limit: int) -> list[ProductSchema]: ...

    async def count(self) -> int: ...

    async def create(self, data: ProductCreateSchema) -> ProductSchema: ...

    async def update(self, product_id: uuid.UUID, data: ProductUpdateSchema) -> ProductSchema | None: ...

    async def delete(self, product_id: uuid.UUID) -> bool: ...


class CategoryRepository(Protocol):
    """Хранилище категорий."""

    async def get_by_id(self, category_id: uuid.UUID) -> CategorySchema | None: ...

    async def list_all(self) -> list[CategorySchema]: ...

    async def create(self, data: CategoryCreateSchema) -> CategorySchema: ...

    async def update(self, category_id: uuid.UUID, data: CategoryUpdateSchema) -> CategorySchema | None: ...

    async def delete(self, category_id: uuid.UUID) -> bool: ...


class UserRepository(Protocol):
    """Хранилище пользователей."""

    async def get_by_id(self, user_id: uuid.UUID) -> UserSchema | None: ...

    async def get_by_email(self, email: str) -> UserSchema | None: ...

    async def update(self, user_id: uuid.UUID, data: UserUpdateSchema) -> UserSchema | None: ...
