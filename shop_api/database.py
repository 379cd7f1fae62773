"""
Database configuration and session management
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from shop_api.config import get_settings
from shop_api.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)


def _get_async_url(url: str) -> str:
    """Convert database URL to async variant"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://")
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///")
    return url


# Create async engine
database_url = _get_async_url(settings.DATABASE_URL)
is_sqlite = database_url.startswith("sqlite")
is_memory = is_sqlite and ":memory:" in database_url

engine_kwargs = {
    "echo": settings.DEBUG,
    "future": True,
}

# An in-memory SQLite database lives as long as its connection, so every
# session has to share the same one
if is_memory:
    engine_kwargs["poolclass"] = StaticPool
    engine_kwargs["connect_args"] = {"check_same_thread": False}
elif not is_sqlite:
    engine_kwargs["pool_size"] = 20
    engine_kwargs["max_overflow"] = 10

engine = create_async_engine(database_url, **engine_kwargs)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base class for models
Base = declarative_base()


async def get_db() -> AsyncSession:
    """Dependency for getting database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(bind=None, session_factory=None, seed: Optional[bool] = None) -> None:
    """
    Create all tables and optionally load the demo catalog.

    Runs once before the app starts serving requests. Seeding is skipped when
    the category table already has rows.
    """
    # Models must be imported so their tables are registered on Base.metadata
    from shop_api import models  # noqa: F401
    from shop_api.models.category import Category
    from shop_api.seed import seed_catalog

    bind = bind or engine
    session_factory = session_factory or AsyncSessionLocal
    if seed is None:
        seed = settings.SEED_DATA

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")

    if not seed:
        return

    async with session_factory() as session:
        result = await session.execute(select(Category).limit(1))
        if result.scalars().first():
            logger.info("Catalog already populated, skipping seed")
            return
        await seed_catalog(session)
        await session.commit()
