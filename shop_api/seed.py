"""
Demo catalog loaded on first start
"""
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models.category import Category
from shop_api.models.product import Product
from shop_api.utils.logger import get_logger

logger = get_logger(__name__)

CATEGORIES = [
    (1, "Active Wear - Men"),
    (2, "Active Wear - Women"),
    (3, "Mineral Water"),
    (4, "Publications"),
    (5, "Supplements"),
]

# (id, category_id, name, sku, price, is_available)
PRODUCTS = [
    (1, 1, "Grunge Skater Jeans", "AWMGSJ", "68", True),
    (2, 1, "Polo Shirt", "AWMPS", "35", True),
    (3, 1, "Skater Graphic T-Shirt", "AWMSGT", "33", True),
    (4, 1, "Slicker Jacket", "AWMSJ", "125", True),
    (5, 1, "Thermal Fleece Jacket", "AWMTFJ", "60", True),
    (6, 1, "Unisex Thermal Vest", "AWMUTV", "95", True),
    (7, 1, "V-Neck Pullover", "AWMVNP", "65", True),
    (8, 1, "V-Neck Sweater", "AWMVNS", "65", True),
    (9, 1, "V-Neck T-Shirt", "AWMVNT", "17", False),
    (10, 2, "Bamboo Thermal Ski Coat", "AWWBTSC", "99", True),
    (11, 2, "Cross-Back Training Tank", "AWWCTT", "0.5", False),
    (12, 2, "Grunge Skater Jeans", "AWWGSJ", "68", True),
    (13, 2, "Slicker Jacket", "AWWSJ", "125", True),
    (14, 2, "Stretchy Dance Pants", "AWWSDP", "55", True),
    (15, 2, "Ultra-Soft Tank Top", "AWWUTT", "22", True),
    (16, 2, "Unisex Thermal Vest", "AWWUTV", "95", True),
    (17, 2, "V-Next T-Shirt", "AWWVNT", "17", True),
    (18, 3, "Blueberry Mineral Water", "MWB", "2.8", True),
    (19, 3, "Lemon-Lime Mineral Water", "MWLL", "2.8", True),
    (20, 3, "Orange Mineral Water", "MWO", "2.8", True),
    (21, 3, "Peach Mineral Water", "MWP", "2.8", False),
    (22, 3, "Raspberry Mineral Water", "MWR", "2.8", True),
    (23, 3, "Strawberry Mineral Water", "MWS", "2.8", True),
    (24, 4, "In the Kitchen with H+ Sport", "PITK", "24.99", True),
    (25, 5, "Calcium 400 IU (150 tablets)", "SC400", "9.99", True),
    (26, 5, "Flaxseed Oil 100 mg (90 capsules)", "SFO100", "12.49", True),
    (27, 5, "Iron 65 mg (150 caplets)", "SI65", "13.99", False),
    (28, 5, "Magnesium 250 mg (100 tablets)", "SM250", "12.49", True),
    (29, 5, "Multi-Vitamin (90 capsules)", "SMV", "27.99", True),
    (30, 5, "Vitamin A 10,000 IU (125 caplets)", "SVA", "11.99", True),
    (31, 5, "Vitamin B-Complex (100 caplets)", "SVB", "12.99", True),
    (32, 5, "Vitamin C 1000 mg (100 tablets)", "SVC", "9.99", True),
    (33, 5, "Vitamin D3 1000 IU (100 tablets)", "SVD3", "12.49", True),
]


async def seed_catalog(session: AsyncSession) -> None:
    """Add the demo categories and products to the session (caller commits)"""
    for category_id, name in CATEGORIES:
        session.add(Category(id=category_id, name=name))
    await session.flush()

    for product_id, category_id, name, sku, price, is_available in PRODUCTS:
        session.add(Product(
            id=product_id,
            category_id=category_id,
            name=name,
            description="",
            sku=sku,
            price=Decimal(price),
            is_available=is_available,
        ))
    await session.flush()
    logger.info(f"Seeded {len(CATEGORIES)} categories and {len(PRODUCTS)} products")
