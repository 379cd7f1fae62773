from shop_api.models.category import Category
from shop_api.models.product import Product

__all__ = [
    "Category",
    "Product",
]
