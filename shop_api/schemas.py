"""
Pydantic request/response schemas

Wire names are camelCase, attributes are snake_case; either is accepted on input.
"""
from decimal import Decimal
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, field_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ProductPayload(CamelModel):
    """Full product body for create and update (update replaces every field)"""
    id: int = 0
    name: Optional[str] = None
    description: Optional[str] = ""
    sku: Optional[str] = ""
    price: Decimal = Decimal("0")
    is_available: bool = False
    category_id: Optional[int] = None


class ProductResponse(CamelModel):
    id: int
    name: str
    description: str
    sku: str
    price: Decimal
    is_available: bool
    category_id: int

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        # Two decimal places at most, so the JSON number round-trips exactly
        return float(price)


class CategoryResponse(CamelModel):
    id: int
    name: str


class CategoryDetailResponse(CategoryResponse):
    products: List[ProductResponse] = []


class PaginatedResponse(CamelModel, Generic[T]):
    data: List[T]
    page_number: int
    page_size: int
    total_records: int
    total_pages: int
