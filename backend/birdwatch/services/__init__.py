# Services package init
"""
Birdwatch API — Store Layer
=============================

What:  Data-access layer sitting between routes (HTTP) and persistence.
How:   Routes depend on the abstract BirdStore; the concrete store is chosen
       by birdwatch.dependencies.get_bird_store.

Service Inventory:
    - BirdStore (abstract): list_all() / get_by_id() contract
    - SqlBirdStore: async SQLAlchemy implementation over the `birds` table
    - InMemoryBirdStore: process-local implementation for the memory backend
"""

from birdwatch.services.memory_store import InMemoryBirdStore
from birdwatch.services.sql_store import SqlBirdStore
from birdwatch.services.store_base import BirdStore

__all__ = ["BirdStore", "InMemoryBirdStore", "SqlBirdStore"]
