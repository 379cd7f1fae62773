"""
Read-only category lookups
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from shop_api.exceptions import CategoryNotFoundError, StoreError
from shop_api.models.category import Category
from shop_api.utils.logger import get_logger
from shop_api.utils.validators import is_storable_id

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self) -> List[Category]:
        try:
            result = await self.db.execute(select(Category).order_by(Category.id))
        except (SQLAlchemyError, OverflowError) as e:
            logger.exception("Store failure while listing categories")
            raise StoreError("Store failure while listing categories") from e
        return list(result.scalars().all())

    async def get_category(self, category_id: int) -> Category:
        """Load a category together with its products"""
        if not is_storable_id(category_id):
            raise CategoryNotFoundError(f"Category {category_id} not found.")
        try:
            result = await self.db.execute(
                select(Category)
                .where(Category.id == category_id)
                .options(selectinload(Category.products))
                .execution_options(populate_existing=True)
            )
        except (SQLAlchemyError, OverflowError) as e:
            logger.exception(f"Store failure while loading category {category_id}")
            raise StoreError(f"Store failure while loading category {category_id}") from e
        category = result.scalar_one_or_none()
        if not category:
            raise CategoryNotFoundError(f"Category {category_id} not found.")
        return category
