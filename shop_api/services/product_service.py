"""
Product CRUD service

Validates payloads, then delegates to the SQLAlchemy session. Every store
failure is rolled back, logged and re-raised as ``StoreError``.
"""
from contextlib import asynccontextmanager
from typing import List, Optional, Tuple

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.exceptions import ProductNotFoundError, ProductValidationError, StoreError
from shop_api.models.category import Category
from shop_api.models.product import Product
from shop_api.schemas import ProductPayload
from shop_api.utils.logger import get_logger
from shop_api.utils.pagination import ProductQueryParameters
from shop_api.utils.validators import (
    is_storable_id,
    validate_id_list,
    validate_new_product,
    validate_page_offset,
    validate_product_id,
    validate_product_update,
)

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _store(self, action: str):
        try:
            yield
        except (SQLAlchemyError, OverflowError) as e:
            await self.db.rollback()
            logger.exception(f"Store failure while {action}")
            raise StoreError(f"Store failure while {action}") from e

    # --- Reads ---

    async def list_products(self, params: ProductQueryParameters) -> Tuple[List[Product], int]:
        """Return one page of products (ordered by id) and the total match count"""
        validate_page_offset(params.offset)
        query = select(Product)
        if params.min_price is not None:
            query = query.where(Product.price >= params.min_price)
        if params.max_price is not None:
            query = query.where(Product.price <= params.max_price)
        if params.sku:
            query = query.where(Product.sku == params.sku)
        if params.name:
            query = query.where(Product.name.icontains(params.name.strip(), autoescape=True))

        async with self._store("listing products"):
            total = await self.db.scalar(
                select(func.count()).select_from(query.subquery())
            )
            result = await self.db.execute(
                query.order_by(Product.id).offset(params.offset).limit(params.limit)
            )
            return list(result.scalars().all()), total or 0

    async def list_available(self) -> List[Product]:
        async with self._store("listing available products"):
            result = await self.db.execute(
                select(Product).where(Product.is_available.is_(True)).order_by(Product.id)
            )
            return list(result.scalars().all())

    async def get_product(self, product_id: int) -> Product:
        validate_product_id(product_id)
        async with self._store(f"loading product {product_id}"):
            product = await self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found.")
        return product

    # --- Writes ---

    async def create_product(self, payload: Optional[ProductPayload]) -> Product:
        payload = validate_new_product(payload)
        await self._ensure_category(payload.category_id)

        product = Product(id=payload.id)
        _apply(product, payload)
        async with self._store(f"creating product {payload.id}"):
            self.db.add(product)
            await self.db.commit()
            await self.db.refresh(product)
        logger.info(f"Created product {product.id}")
        return product

    async def update_product(self, product_id: int, payload: Optional[ProductPayload]) -> Product:
        """Replace every mutable field of an existing product"""
        payload = validate_product_update(product_id, payload)

        async with self._store(f"loading product {product_id}"):
            product = await self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found.")
        await self._ensure_category(payload.category_id)

        _apply(product, payload)
        async with self._store(f"updating product {product_id}"):
            await self.db.commit()
        logger.info(f"Updated product {product_id}")
        return product

    async def delete_product(self, product_id: int) -> Product:
        if not is_storable_id(product_id):
            raise ProductNotFoundError(f"Product {product_id} not found.")
        async with self._store(f"loading product {product_id}"):
            product = await self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found.")

        async with self._store(f"deleting product {product_id}"):
            await self.db.delete(product)
            await self.db.commit()
        logger.info(f"Deleted product {product_id}")
        return product

    async def delete_products(self, ids: Optional[List[int]]) -> List[Product]:
        """
        Delete every listed product that exists.

        Ids with no stored product are ignored; only a batch where nothing
        matches is an error. No transaction spans lookup and delete.
        """
        ids = validate_id_list(ids)
        if not ids:
            raise ProductNotFoundError("No products found for the given IDs.")
        async with self._store("loading products for batch delete"):
            result = await self.db.execute(
                select(Product).where(Product.id.in_(ids)).order_by(Product.id)
            )
            products = list(result.scalars().all())
        if not products:
            raise ProductNotFoundError("No products found for the given IDs.")

        async with self._store("deleting products"):
            for product in products:
                await self.db.delete(product)
            await self.db.commit()

        deleted = [p.id for p in products]
        skipped = [i for i in ids if i not in deleted]
        logger.info(f"Deleted products {deleted}" + (f", not found: {skipped}" if skipped else ""))
        return products

    async def _ensure_category(self, category_id: int) -> None:
        if not is_storable_id(category_id):
            raise ProductValidationError(f"Category {category_id} does not exist.")
        async with self._store(f"loading category {category_id}"):
            category = await self.db.get(Category, category_id)
        if category is None:
            raise ProductValidationError(f"Category {category_id} does not exist.")


def _apply(product: Product, payload: ProductPayload) -> None:
    product.name = payload.name
    product.description = payload.description or ""
    product.sku = payload.sku or ""
    product.price = payload.price
    product.is_available = payload.is_available
    product.category_id = payload.category_id
