"""Seed the standard muscle groups. Existing names are skipped, so reruns are safe."""

import asyncio

from sqlalchemy import select

from liftlog.core.config import get_settings
from liftlog.core.constants import DEFAULT_MUSCLE_GROUPS
from liftlog.core.enums import Body
from liftlog.db.session import build_engine, build_session_maker
from liftlog.models import MuscleGroup


async def seed(session) -> int:
    """Insert missing default muscle groups; returns how many were added."""
    result = await session.execute(select(MuscleGroup.name))
    existing = set(result.scalars().all())
    added = 0
    for name, body, description in DEFAULT_MUSCLE_GROUPS:
        if name in existing:
            continue
        session.add(MuscleGroup(name=name, body=Body(body), description=description))
        added += 1
    await session.flush()
    return added


async def main():
    engine = build_engine(get_settings())
    session_maker = build_session_maker(engine)
    async with session_maker() as session:
        added = await seed(session)
        await session.commit()
    print(f"Seeded {added} muscle groups ({len(DEFAULT_MUSCLE_GROUPS) - added} already present).")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
