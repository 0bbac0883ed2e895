"""
Birdwatch API — Request Dependencies
======================================

What:  FastAPI dependency that hands each request its BirdStore.
How:   If the application was built with an explicit store
       (create_app(store=...)), that store is attached to app.state and
       returned as-is. Otherwise a fresh AsyncSession is opened for the
       request and wrapped in a SqlBirdStore; the session is closed when the
       response has been produced.

Example usage in a route:
    @router.get("/birds")
    async def list_birds(store: BirdStore = Depends(get_bird_store)):
        return await store.list_all()
"""

from typing import AsyncGenerator

from fastapi import Request

from birdwatch.database import async_session_factory
from birdwatch.services.sql_store import SqlBirdStore
from birdwatch.services.store_base import BirdStore


async def get_bird_store(request: Request) -> AsyncGenerator[BirdStore, None]:
    store = getattr(request.app.state, "bird_store", None)
    if store is not None:
        yield store
        return

    # Read-only: nothing to commit, the context manager closes the session
    async with async_session_factory() as session:
        yield SqlBirdStore(session)
