"""
Сервис пользователей.

Пользователь кешируется под двумя ключами: по id и по email (в нижнем
регистре). При изменении удаляются оба, а при смене email также ключ
по прежнему адресу, иначе старый email продолжал бы находить пользователя.
"""

from uuid import UUID

from app.core.exceptions import EntityNotFoundError
from app.repository.cache import CacheKeys
from app.repository.protocols import UserRepository
from app.schemas import UserSchema, UserUpdateSchema
from app.services.base import BaseService
from app.services.cache import CacheService
from app.services.invalidation import CacheInvalidator


class UserService(BaseService):
    """
    Сервис пользователей.

    Attributes:
        repository (UserRepository): Хранилище пользователей.
        cache (CacheService): Сервис кеширования.
        invalidator (CacheInvalidator): Инвалидация после фиксации изменений.
    """

    def __init__(self, repository: UserRepository, cache: CacheService):
        super().__init__()
        self.repository = repository
        self.cache = cache
        self.invalidator = CacheInvalidator(cache)

    @property
    def ttl(self):
        return self.settings.cache.user_ttl

    async def get_user(self, user_id: UUID) -> UserSchema:
        """
        Получает пользователя по ID.

        Raises:
            EntityNotFoundError: Если пользователь не найден
        """
        user = await self.cache.get_or_set(
            CacheKeys.user_by_id(user_id),
            lambda: self.repository.get_by_id(user_id),
            ttl=self.ttl,
            schema=UserSchema,
        )
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def get_user_by_email(self, email: str) -> UserSchema:
        """
        Получает пользователя по email без учета регистра.

        Raises:
            EntityNotFoundError: Если пользователь не найден
        """
        normalized = email.lower()
        user = await self.cache.get_or_set(
            CacheKeys.user_by_email(normalized),
            lambda: self.repository.get_by_email(normalized),
            ttl=self.ttl,
            schema=UserSchema,
        )
        if user is None:
            raise EntityNotFoundError("User", normalized, field="email")
        return user

    async def update_user(self, user_id: UUID, data: UserUpdateSchema) -> UserSchema:
        """
        Обновляет пользователя.

        Текущее состояние читается из хранилища, а не из кеша: прежний email
        нужен точным, чтобы удалить его ключ.

        Raises:
            EntityNotFoundError: Если пользователь не найден
        """
        current = await self.repository.get_by_id(user_id)
        if current is None:
            raise EntityNotFoundError("User", user_id)

        keys = [CacheKeys.user_by_id(user_id), CacheKeys.user_by_email(current.email)]
        if data.email is not None:
            keys.append(CacheKeys.user_by_email(data.email))

        user = await self.invalidator.after_commit(
            lambda: self.repository.update(user_id, data),
            keys=keys,
        )
        if user is None:
            raise EntityNotFoundError("User", user_id)

        self.logger.info("Пользователь обновлен: %s", user_id)
        return user
