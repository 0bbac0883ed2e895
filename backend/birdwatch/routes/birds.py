"""
Birdwatch API — Birds Route Handlers
======================================

What:  Handles GET /birds (index) and GET /birds/{id} (show).
How:   Resolves the request's BirdStore, calls it, and returns the records
       as BirdResponse JSON. Missing birds raise NotFoundError, which the
       global handler turns into 404 {"error": "Bird not found"}.

Route Table:
    GET /birds        → list_birds   200 [BirdResponse, ...]
    GET /birds/{id}   → show_bird    200 BirdResponse | 404 NotFoundResponse

No other bird routes are registered; the API is read-only.

Malformed ids:
    The id segment is accepted as a string and parsed here rather than by
    FastAPI, which would answer 422. An id that is not a plain decimal
    number (or is larger than the id column can hold) can never match a
    record, so it gets the same 404 as an unknown id. The segment uses the
    `path` converter so that ids containing a slash (literal or %2F) and
    the empty id of /birds/ reach parse_bird_id too.
"""

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends

from birdwatch.dependencies import get_bird_store
from birdwatch.exceptions import NotFoundError
from birdwatch.models.bird import BIRD_ID_MAX
from birdwatch.schemas.bird import BirdResponse, ErrorResponse, NotFoundResponse
from birdwatch.services.store_base import BirdStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Birds"])

_BIRD_ID_RE = re.compile(r"[0-9]+")


def parse_bird_id(raw: str) -> Optional[int]:
    """
    Parse a path segment as a bird id.

    Returns None for anything that is not ASCII digits or that exceeds the
    id column's range.
    """
    if not _BIRD_ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value > BIRD_ID_MAX:
        return None
    return value


@router.get(
    "/birds",
    response_model=List[BirdResponse],
    responses={
        200: {"description": "All birds in creation order"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all birds",
)
async def list_birds(
    store: BirdStore = Depends(get_bird_store),
) -> List[BirdResponse]:
    """Return every bird, oldest first. No pagination."""
    birds = await store.list_all()
    return [BirdResponse.model_validate(bird) for bird in birds]


@router.get(
    "/birds/{bird_id:path}",
    response_model=BirdResponse,
    responses={
        200: {"description": "The requested bird", "model": BirdResponse},
        404: {"description": "Bird not found", "model": NotFoundResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single bird by ID",
)
async def show_bird(
    bird_id: str,
    store: BirdStore = Depends(get_bird_store),
) -> BirdResponse:
    """
    Return one bird.

    Args:
        bird_id: Raw path segment. Parsed with parse_bird_id(); ids that do
                 not parse are answered exactly like ids with no record.
    """
    parsed_id = parse_bird_id(bird_id)
    if parsed_id is None:
        logger.debug("Unparseable bird id %r", bird_id)
        raise NotFoundError(resource="bird", resource_id=bird_id)

    bird = await store.get_by_id(parsed_id)
    if bird is None:
        raise NotFoundError(resource="bird", resource_id=bird_id)

    return BirdResponse.model_validate(bird)
