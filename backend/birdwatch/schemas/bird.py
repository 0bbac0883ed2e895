"""
Birdwatch API — Pydantic Response Schemas
===========================================

What:  Pydantic models defining the JSON the API returns.
How:   FastAPI uses these models to serialize responses and to generate the
       OpenAPI document.
Who:   Used by route handlers as response models.

Schemas are separate from the SQLAlchemy model so that internal columns
(created_at, updated_at) never reach the client.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BirdResponse(BaseModel):
    """
    What:  Public representation of a bird.
    Who:   Returned as array items by GET /birds and on its own by
           GET /birds/{id}.

    Example:
        {"id": 2, "name": "Grackle", "species": "Quiscalus Quiscula"}
    """
    id: int = Field(description="Unique bird identifier")
    name: str = Field(description="Common name")
    species: str = Field(description="Species (binomial name)")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class NotFoundResponse(BaseModel):
    """Body of every 404 from the birds routes: {"error": "Bird not found"}."""
    error: str = Field(description="Human-readable not-found message")


class ErrorResponse(BaseModel):
    """
    What:  Error format for server-side failures (5xx).

    Fields:
        error: Machine-readable error code (e.g., "server_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected, unused")
    store_backend: str = Field(description="Configured store backend: sql or memory")
    uptime_seconds: float = Field(description="Seconds since service started")
