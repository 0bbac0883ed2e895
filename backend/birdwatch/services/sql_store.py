"""
Birdwatch API — SQL Bird Store
================================

What:  BirdStore backed by the `birds` table through an AsyncSession.
How:   One instance per request, wrapping that request's session.
       SQLAlchemy errors are logged and re-raised as DatabaseError so the
       global handler answers with a generic 500.

Query plans:
    list_all:   SELECT ... FROM birds ORDER BY id
    get_by_id:  SELECT ... FROM birds WHERE id = :id  (primary key)
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from birdwatch.exceptions import DatabaseError
from birdwatch.models.bird import Bird
from birdwatch.services.store_base import BirdStore

logger = logging.getLogger(__name__)


class SqlBirdStore(BirdStore):
    """Reads birds with the caller's session; never writes."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Bird]:
        try:
            result = await self.session.execute(select(Bird).order_by(Bird.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing birds: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve birds. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_by_id(self, bird_id: int) -> Optional[Bird]:
        try:
            result = await self.session.execute(select(Bird).where(Bird.id == bird_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching bird %s: %s", bird_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the bird. Please try again.",
                context={"bird_id": bird_id, "error_type": type(e).__name__},
            )
