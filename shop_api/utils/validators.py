"""
Input validation utilities

Each check raises ``ProductValidationError`` with the first failing reason.
Checks run in a fixed order and never touch the store.
"""
from decimal import Decimal
from typing import Optional

from shop_api.exceptions import ProductValidationError
from shop_api.schemas import ProductPayload

# Largest value a 64-bit INTEGER column can hold
MAX_ID = 2 ** 63 - 1
PRICE_STEP = Decimal("0.01")
# Numeric(10, 2)
PRICE_MAX = Decimal("99999999.99")

PAYLOAD_REQUIRED = "Product data is required."
NAME_REQUIRED = "Product name is required."
PRICE_NOT_POSITIVE = "Product price must be greater than zero."
PRICE_PRECISION = "Product price must have at most two decimal places."
PRICE_TOO_LARGE = "Product price is too large."
ID_NOT_POSITIVE = "Product ID must be a positive integer."
ID_MISMATCH = "Product ID in the body does not match the URL."
CATEGORY_REQUIRED = "Product category is required."
INVALID_ID = "Invalid product ID."
IDS_REQUIRED = "Product IDs are required."
PAGE_OUT_OF_RANGE = "Page number is out of range."


def is_storable_id(value: int) -> bool:
    """True if the value fits an identifier column"""
    return 0 < value <= MAX_ID


def validate_product_id(product_id: int) -> int:
    """Validate an identifier taken from the request path"""
    if not is_storable_id(product_id):
        raise ProductValidationError(INVALID_ID)
    return product_id


def validate_new_product(payload: Optional[ProductPayload]) -> ProductPayload:
    """Validate a payload for the create path"""
    _check_fields(payload)
    if not is_storable_id(payload.id):
        raise ProductValidationError(ID_NOT_POSITIVE)
    _check_category(payload)
    return payload


def validate_product_update(product_id: int, payload: Optional[ProductPayload]) -> ProductPayload:
    """Validate a payload for the update path against the id in the URL"""
    _check_fields(payload)
    if payload.id != product_id:
        raise ProductValidationError(ID_MISMATCH)
    if not is_storable_id(product_id):
        raise ProductValidationError(INVALID_ID)
    _check_category(payload)
    return payload


def validate_id_list(ids: Optional[list[int]]) -> list[int]:
    """
    Validate a batch of identifiers, dropping duplicates but keeping order.

    Ids that no row could carry are dropped too; they can never match.
    """
    if not ids:
        raise ProductValidationError(IDS_REQUIRED)
    return [i for i in dict.fromkeys(ids) if is_storable_id(i)]


def validate_page_offset(offset: int) -> int:
    if offset > MAX_ID:
        raise ProductValidationError(PAGE_OUT_OF_RANGE)
    return offset


def _check_fields(payload: Optional[ProductPayload]) -> None:
    if payload is None:
        raise ProductValidationError(PAYLOAD_REQUIRED)
    if payload.name is None or not payload.name.strip():
        raise ProductValidationError(NAME_REQUIRED)
    if payload.price <= 0:
        raise ProductValidationError(PRICE_NOT_POSITIVE)
    if payload.price > PRICE_MAX:
        raise ProductValidationError(PRICE_TOO_LARGE)
    # The price column keeps two places; anything finer would be rounded on write
    if payload.price != payload.price.quantize(PRICE_STEP):
        raise ProductValidationError(PRICE_PRECISION)


def _check_category(payload: ProductPayload) -> None:
    if payload.category_id is None:
        raise ProductValidationError(CATEGORY_REQUIRED)
