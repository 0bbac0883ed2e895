"""
Birdwatch API — In-Memory Bird Store
======================================

What:  BirdStore that keeps transient Bird objects in a Python list.
How:   add() assigns the next id from a counter that only moves forward,
       so ids are unique and never reused. Records are kept in insertion
       order, which is the order list_all() returns.
Who:   Backs the `memory` store backend and the API tests.

Records are loaded before the app starts serving; request handling only
reads from the store.
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional

from birdwatch.models.bird import Bird
from birdwatch.services.store_base import BirdStore


class InMemoryBirdStore(BirdStore):

    def __init__(self) -> None:
        self._birds: List[Bird] = []
        self._by_id: Dict[int, Bird] = {}
        self._next_id = 1

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, str]]) -> "InMemoryBirdStore":
        """Build a store holding `records` (mappings with name/species) in order."""
        store = cls()
        for record in records:
            store.add(name=record["name"], species=record["species"])
        return store

    def add(self, name: str, species: str) -> Bird:
        """Create a bird with the next id and append it to the store."""
        now = datetime.now(timezone.utc)
        bird = Bird(
            id=self._next_id,
            name=name,
            species=species,
            created_at=now,
            updated_at=now,
        )
        self._next_id += 1
        self._birds.append(bird)
        self._by_id[bird.id] = bird
        return bird

    def __len__(self) -> int:
        return len(self._birds)

    async def list_all(self) -> List[Bird]:
        # Copy so callers cannot reorder the store
        return list(self._birds)

    async def get_by_id(self, bird_id: int) -> Optional[Bird]:
        return self._by_id.get(bird_id)
