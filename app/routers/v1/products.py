"""
Роутер для работы с товарами каталога.

Чтение идет через кеш (cache-aside), запись фиксируется в хранилище
и затем инвалидирует ключ товара и все страницы списка.
"""

from uuid import UUID

from fastapi import Query, status

from app.core.dependencies import ProductServiceDep
from app.routers.base import BaseRouter
from app.schemas import (
    BaseResponseSchema,
    ProductCreateSchema,
    ProductPageResponseSchema,
    ProductResponseSchema,
    ProductUpdateSchema,
)
from app.services.v1.products import MAX_PAGE_SIZE


class ProductRouter(BaseRouter):
    """
    Роутер для API товаров.

    Endpoints:
        GET /products - Страница товаров
        GET /products/{product_id} - Товар по ID
        POST /products - Создать товар
        PATCH /products/{product_id} - Обновить товар
        DELETE /products/{product_id} - Удалить товар
    """

    def __init__(self):
        super().__init__(prefix="products", tags=["Products"])

    def configure(self):
        @self.router.get(
            path="",
            response_model=ProductPageResponseSchema,
            description="""\
## 📦 Страница товаров

Страница кешируется под ключом `products:list:page:{page}:size:{page_size}`
и сбрасывается при любом изменении товаров.
""",
        )
        async def list_products(
            service: ProductServiceDep,
            page: int = Query(1, ge=1, description="Номер страницы"),
            page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Размер страницы"),
        ) -> ProductPageResponseSchema:
            data = await service.list_products(page=page, page_size=page_size)
            return ProductPageResponseSchema(message="Товары получены", data=data)

        @self.router.get(
            path="/{product_id}",
            response_model=ProductResponseSchema,
            description="""\
## 🔍 Товар по ID

### Errors:
- **404** — товар не найден (отсутствие не кешируется)
""",
        )
        async def get_product(product_id: UUID, service: ProductServiceDep) -> ProductResponseSchema:
            product = await service.get_product(product_id)
            return ProductResponseSchema(message="Товар получен", data=product)

        @self.router.post(
            path="",
            response_model=ProductResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""\
## ➕ Создать товар

### Errors:
- **404** — категория не найдена
""",
        )
        async def create_product(data: ProductCreateSchema, service: ProductServiceDep) -> ProductResponseSchema:
            product = await service.create_product(data)
            return ProductResponseSchema(message="Товар создан", data=product)

        @self.router.patch(
            path="/{product_id}",
            response_model=ProductResponseSchema,
            description="""\
## ✏️ Обновить товар

Обновляются только переданные поля.

### Errors:
- **404** — товар или новая категория не найдены
""",
        )
        async def update_product(
            product_id: UUID,
            data: ProductUpdateSchema,
            service: ProductServiceDep,
        ) -> ProductResponseSchema:
            product = await service.update_product(product_id, data)
            return ProductResponseSchema(message="Товар обновлен", data=product)

        @self.router.delete(path="/{product_id}", response_model=BaseResponseSchema)
        async def delete_product(product_id: UUID, service: ProductServiceDep) -> BaseResponseSchema:
            await service.delete_product(product_id)
            return BaseResponseSchema(message="Товар удален")
