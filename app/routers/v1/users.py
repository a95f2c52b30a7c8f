"""
Роутер для работы с пользователями.

Пользователь кешируется по id и по email. Поиск по email не зависит
от регистра.
"""

from uuid import UUID

from fastapi import Query

from app.core.dependencies import UserServiceDep
from app.routers.base import BaseRouter
from app.schemas import UserResponseSchema, UserUpdateSchema


class UserRouter(BaseRouter):
    """
    Роутер для API пользователей.

    Endpoints:
        GET /users/by-email?email=... - Пользователь по email
        GET /users/{user_id} - Пользователь по ID
        PATCH /users/{user_id} - Обновить пользователя
    """

    def __init__(self):
        super().__init__(prefix="users", tags=["Users"])

    def configure(self):
        # /by-email объявляется перед /{user_id}
        @self.router.get(
            path="/by-email",
            response_model=UserResponseSchema,
            description="""\
## 📧 Пользователь по email

Email сравнивается без учета регистра.

### Errors:
- **404** — пользователь не найден
""",
        )
        async def get_user_by_email(
            service: UserServiceDep,
            email: str = Query(..., min_length=1, description="Email пользователя"),
        ) -> UserResponseSchema:
            user = await service.get_user_by_email(email)
            return UserResponseSchema(message="Пользователь получен", data=user)

        @self.router.get(path="/{user_id}", response_model=UserResponseSchema)
        async def get_user(user_id: UUID, service: UserServiceDep) -> UserResponseSchema:
            user = await service.get_user(user_id)
            return UserResponseSchema(message="Пользователь получен", data=user)

        @self.router.patch(
            path="/{user_id}",
            response_model=UserResponseSchema,
            description="""\
## ✏️ Обновить пользователя

При смене email из кеша удаляются ключи и по старому, и по новому адресу.
""",
        )
        async def update_user(user_id: UUID, data: UserUpdateSchema, service: UserServiceDep) -> UserResponseSchema:
            user = await service.update_user(user_id, data)
            return UserResponseSchema(message="Пользователь обновлен", data=user)
