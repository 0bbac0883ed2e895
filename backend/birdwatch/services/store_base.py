"""
Birdwatch API — Abstract Bird Store Interface
===============================================

What:  Abstract base class defining the contract the HTTP layer consumes.
How:   Concrete stores inherit from BirdStore and implement list_all() and
       get_by_id().
Who:   Injected into the birds routes through birdwatch.dependencies.

Implementations:
    - SqlBirdStore: async SQLAlchemy session over the `birds` table
    - InMemoryBirdStore: ordered list of records held in process memory
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from birdwatch.models.bird import Bird


class BirdStore(ABC):
    """
    Read-only access to bird records.

    Contract:
        - list_all() returns every record in creation order
        - get_by_id() returns the record or None; a missing id is not an error
        - Backend failures are raised as DatabaseError
    """

    @abstractmethod
    async def list_all(self) -> List[Bird]:
        """
        Return all birds in creation order.

        Returns:
            List of Bird records; an empty list when the store holds none.

        Raises:
            DatabaseError: the backend could not be read.
        """
        ...

    @abstractmethod
    async def get_by_id(self, bird_id: int) -> Optional[Bird]:
        """
        Return the bird with `bird_id`, or None when there is no such record.

        Raises:
            DatabaseError: the backend could not be read.
        """
        ...
