"""
Birdwatch API — Seed Data Loader
==================================

What:  The reference bird records and a loader that inserts them.
How:   seed_birds() inserts SEED_BIRDS, in order, into an empty `birds`
       table. A table that already holds rows is left alone, so running the
       loader twice does not duplicate data.
Who:   The lifespan (when SEED_ON_STARTUP is set), the memory store backend,
       and the command line:

           python -m birdwatch.seed
"""

import asyncio
import logging
from typing import Dict, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from birdwatch.models.bird import Bird

logger = logging.getLogger(__name__)

SEED_BIRDS: List[Dict[str, str]] = [
    {"name": "Black-Capped Chickadee", "species": "Poecile Atricapillus"},
    {"name": "Grackle", "species": "Quiscalus Quiscula"},
    {"name": "Common Starling", "species": "Sturnus Vulgaris"},
    {"name": "Mourning Dove", "species": "Zenaida Macroura"},
]


async def seed_birds(session: AsyncSession) -> int:
    """
    Insert SEED_BIRDS if the table is empty.

    Rows are added and flushed one at a time so ids follow list order.
    The caller owns the transaction and commits it.

    Returns:
        Number of birds inserted (0 when the table already had rows).
    """
    existing = (await session.execute(select(func.count(Bird.id)))).scalar() or 0
    if existing:
        logger.info("Birds table already holds %d rows; skipping seed", existing)
        return 0

    for record in SEED_BIRDS:
        session.add(Bird(name=record["name"], species=record["species"]))
        await session.flush()

    logger.info("Seeded %d birds", len(SEED_BIRDS))
    return len(SEED_BIRDS)


async def main() -> None:
    """Create the tables and seed the configured database."""
    from birdwatch.database import async_session_factory, create_tables, dispose_engine

    await create_tables()
    try:
        async with async_session_factory() as session:
            async with session.begin():
                inserted = await seed_birds(session)
        logger.info("Inserted %d birds", inserted)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    asyncio.run(main())
