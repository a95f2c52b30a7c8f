"""
Модуль для проверки состояния приложения.

Предоставляет эндпоинты для мониторинга здоровья приложения
и доступности бэкенда кеша.
"""

from app.core.dependencies.health import HealthServiceDep
from app.routers.base import BaseRouter
from app.schemas import HealthCheckDataSchema, HealthCheckResponseSchema


class HealthRouter(BaseRouter):
    """
    Роутер для проверки состояния приложения.

    Endpoints:
        GET /health - Проверка приложения и бэкенда кеша
        GET /health/live - Быстрая проверка жизнеспособности приложения
    """

    def __init__(self):
        super().__init__(prefix="health", tags=["Health"])

    def configure(self):
        @self.router.get(
            path="",
            response_model=HealthCheckResponseSchema,
            description="""\
## 🩺 Проверка состояния приложения

Возвращает статус приложения, выбранный бэкенд кеша и его доступность.
Недоступный кеш не считается отказом: запросы обслуживаются из хранилища.

### Returns:
- **success** — успешность запроса
- **message** — сообщение о статусе
- **data** — статусы (app, cache, cache_backend)
""",
        )
        async def health_check(
            health_service: HealthServiceDep,
        ) -> HealthCheckResponseSchema:
            status = await health_service.check()
            data = HealthCheckDataSchema(**status)

            message = "Все сервисы работают" if data.cache != "fail" else "Кеш недоступен"
            return HealthCheckResponseSchema(success=True, message=message, data=data)

        @self.router.get(
            path="/live",
            response_model=HealthCheckResponseSchema,
            description="""\
## 💓 Быстрая проверка жизнеспособности

Минимальная проверка того, что приложение работает.
Кеш не опрашивается.
""",
        )
        async def liveness_check(
            health_service: HealthServiceDep,
        ) -> HealthCheckResponseSchema:
            status = await health_service.check_liveness()
            data = HealthCheckDataSchema(**status)

            return HealthCheckResponseSchema(success=True, message="Приложение работает", data=data)
