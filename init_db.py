"""Initialize database tables and the demo catalog"""
import asyncio
from shop_api.database import init_db


async def init():
    await init_db()
    print("Database initialized successfully.")


if __name__ == "__main__":
    asyncio.run(init())
