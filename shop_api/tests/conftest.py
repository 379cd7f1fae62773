"""
Test fixtures - in-memory SQLite database + HTTP client bound to the app
"""
from decimal import Decimal

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from shop_api.database import Base, get_db, init_db
from shop_api.main import app
from shop_api.models.category import Category
from shop_api.models.product import Product


@pytest_asyncio.fixture()
async def engine():
    """Fresh in-memory SQLite engine per test"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool
    )
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture()
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture()
async def db_session(engine, session_factory):
    """Session on an empty schema (no demo catalog)"""
    await init_db(bind=engine, session_factory=session_factory, seed=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture()
async def seed_data(db_session):
    """Insert baseline test data: 2 categories + 3 products"""
    supplements = Category(id=1, name="Supplements")
    water = Category(id=2, name="Mineral Water")
    db_session.add_all([supplements, water])
    await db_session.flush()

    products = [
        Product(id=1, name="Vitamin C", description="100 tablets", sku="SVC",
                price=Decimal("9.99"), is_available=True, category_id=1),
        Product(id=2, name="Iron 65 mg", description="", sku="SI65",
                price=Decimal("13.99"), is_available=False, category_id=1),
        Product(id=3, name="Lemon-Lime Mineral Water", description="", sku="MWLL",
                price=Decimal("2.80"), is_available=True, category_id=2),
    ]
    db_session.add_all(products)
    await db_session.commit()

    return {"supplements": supplements, "water": water, "products": products}


@pytest_asyncio.fixture()
async def client(db_session, seed_data):
    """httpx AsyncClient bound to the FastAPI app, sharing the test session"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as ac:
        yield ac

    app.dependency_overrides.clear()
