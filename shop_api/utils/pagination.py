"""
Query parameter normalization for paged listings
"""
import math
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, model_validator

from shop_api.config import get_settings


class QueryParameters(BaseModel):
    """
    A 1-based page request.

    ``size`` is silently clamped to ``MAX_PAGE_SIZE``. A ``page`` below 1 is
    treated as page 1 and a ``size`` below 1 as 1, so the offset is never
    negative. A missing ``size`` falls back to ``DEFAULT_PAGE_SIZE``.
    """
    page: int = 1
    size: Optional[int] = None

    @model_validator(mode="after")
    def _normalize(self):
        settings = get_settings()
        if self.size is None:
            self.size = settings.DEFAULT_PAGE_SIZE
        self.size = max(1, min(settings.MAX_PAGE_SIZE, self.size))
        self.page = max(1, self.page)
        return self

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size

    def total_pages(self, total_records: int) -> int:
        return math.ceil(total_records / self.size)


class ProductQueryParameters(QueryParameters):
    """Page request plus optional product filters (price bounds are inclusive)"""
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sku: Optional[str] = None
    name: Optional[str] = None
