"""
Validation and query-normalization unit tests (no database).
"""
from decimal import Decimal

import pytest

from shop_api.exceptions import ProductValidationError
from shop_api.schemas import ProductPayload
from shop_api.utils.pagination import QueryParameters, ProductQueryParameters
from shop_api.utils.validators import (
    validate_id_list,
    validate_page_offset,
    validate_new_product,
    validate_product_id,
    validate_product_update,
)


def payload(**overrides):
    data = {"id": 1, "name": "Widget", "price": Decimal("9.99"), "category_id": 1}
    data.update(overrides)
    return ProductPayload(**data)


class TestProductValidation:

    def test_valid_product_passes(self):
        p = payload()
        assert validate_new_product(p) is p

    def test_missing_payload(self):
        with pytest.raises(ProductValidationError, match="Product data is required."):
            validate_new_product(None)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name(self, name):
        with pytest.raises(ProductValidationError, match="Product name is required."):
            validate_new_product(payload(name=name))

    @pytest.mark.parametrize("price", ["0", "-0.01"])
    def test_non_positive_price(self, price):
        with pytest.raises(ProductValidationError, match="greater than zero"):
            validate_new_product(payload(price=Decimal(price)))

    def test_non_positive_id_on_create(self):
        with pytest.raises(ProductValidationError, match="positive integer"):
            validate_new_product(payload(id=-3))

    def test_missing_category(self):
        with pytest.raises(ProductValidationError, match="Product category is required."):
            validate_new_product(payload(category_id=None))

    def test_first_failure_is_reported(self):
        # name, price and id are all wrong; name is checked first
        with pytest.raises(ProductValidationError) as exc:
            validate_new_product(payload(name="", price=Decimal("0"), id=0))
        assert str(exc.value) == "Product name is required."

    def test_price_checked_before_id(self):
        with pytest.raises(ProductValidationError) as exc:
            validate_new_product(payload(price=Decimal("0"), id=0))
        assert "price" in str(exc.value)

    def test_update_id_mismatch(self):
        with pytest.raises(ProductValidationError, match="does not match the URL"):
            validate_product_update(2, payload(id=3))

    def test_update_checks_fields_before_mismatch(self):
        with pytest.raises(ProductValidationError, match="Product name is required."):
            validate_product_update(2, payload(id=3, name=""))

    def test_update_matching_id(self):
        p = payload(id=2)
        assert validate_product_update(2, p) is p

    def test_camel_case_payload(self):
        p = ProductPayload.model_validate({"id": 4, "name": "X", "price": 1, "categoryId": 2, "isAvailable": True})
        assert p.category_id == 2
        assert p.is_available is True


class TestIdValidation:

    @pytest.mark.parametrize("product_id", [0, -1])
    def test_non_positive_path_id(self, product_id):
        with pytest.raises(ProductValidationError, match="Invalid product ID."):
            validate_product_id(product_id)

    def test_positive_path_id(self):
        assert validate_product_id(7) == 7

    @pytest.mark.parametrize("ids", [None, []])
    def test_empty_id_list(self, ids):
        with pytest.raises(ProductValidationError, match="Product IDs are required."):
            validate_id_list(ids)

    def test_id_list_deduplicated_in_order(self):
        assert validate_id_list([3, 1, 3, 2, 1]) == [3, 1, 2]


class TestQueryParameters:

    def test_defaults(self):
        q = QueryParameters()
        assert q.page == 1
        assert q.size == 50
        assert q.offset == 0

    def test_offset_is_one_based(self):
        q = QueryParameters(page=3, size=20)
        assert q.offset == 40
        assert q.limit == 20

    def test_size_clamped_to_max(self):
        q = QueryParameters(size=150)
        assert q.size == 100

    def test_non_positive_page_and_size(self):
        q = QueryParameters(page=0, size=0)
        assert q.page == 1
        assert q.size == 1
        assert q.offset == 0

        q = QueryParameters(page=-4, size=10)
        assert q.offset == 0

    def test_total_pages(self):
        q = QueryParameters(size=10)
        assert q.total_pages(0) == 0
        assert q.total_pages(10) == 1
        assert q.total_pages(11) == 2

    def test_product_filters_inherit_paging(self):
        q = ProductQueryParameters(page=2, size=500, min_price=Decimal("1"), name="tea")
        assert q.size == 100
        assert q.offset == 100
        assert q.min_price == Decimal("1")
        assert q.sku is None


class TestBounds:

    @pytest.mark.parametrize("price", ["0.001", "9.999", "1.005"])
    def test_sub_cent_price(self, price):
        with pytest.raises(ProductValidationError, match="at most two decimal places"):
            validate_new_product(payload(price=Decimal(price)))

    def test_trailing_zeros_allowed(self):
        assert validate_new_product(payload(price=Decimal("9.900"))).price == Decimal("9.900")

    def test_price_above_column_limit(self):
        with pytest.raises(ProductValidationError, match="too large"):
            validate_new_product(payload(price=Decimal("1E+30")))

    def test_path_id_above_integer_column(self):
        with pytest.raises(ProductValidationError, match="Invalid product ID."):
            validate_product_id(2 ** 63)
        assert validate_product_id(2 ** 63 - 1) == 2 ** 63 - 1

    def test_create_id_above_integer_column(self):
        with pytest.raises(ProductValidationError, match="positive integer"):
            validate_new_product(payload(id=2 ** 63))

    def test_unstorable_ids_dropped_from_batch(self):
        assert validate_id_list([2 ** 64, 4, -1]) == [4]
        assert validate_id_list([2 ** 64]) == []

    def test_page_offset_bound(self):
        q = QueryParameters(page=10 ** 19, size=100)
        with pytest.raises(ProductValidationError, match="out of range"):
            validate_page_offset(q.offset)
        assert validate_page_offset(QueryParameters(page=3).offset) == 100
