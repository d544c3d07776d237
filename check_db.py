"""Print the row count of every table."""

import asyncio

from sqlalchemy import text

from liftlog.core.config import get_settings
from liftlog.db.base import Base
from liftlog.db.session import build_engine, build_session_maker
from liftlog.models import *  # noqa: F401, F403 - register all models


async def check_data():
    engine = build_engine(get_settings())
    session_maker = build_session_maker(engine)
    tables = list(Base.metadata.tables)
    print(f"Checking tables: {tables}")
    async with session_maker() as session:
        for table in tables:
            try:
                result = await session.execute(text(f'SELECT count(*) FROM "{table}"'))
                count = result.scalar()
                print(f"Table '{table}' row count: {count}")
            except Exception as e:
                print(f"Error querying {table}: {e}")
                await session.rollback()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
