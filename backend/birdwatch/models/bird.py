"""
Birdwatch API — Bird SQLAlchemy Model
=======================================

What:  ORM model representing the `birds` table.
How:   Inherits from the shared DeclarativeBase; `create_tables()` builds the
       table from this mapping on an empty database.
Who:   Returned by every BirdStore implementation and serialized by the
       birds routes.

Table Design:
    - id: INTEGER primary key assigned by the database. With
      sqlite_autoincrement the id of a deleted row is never handed out again.
    - name / species: free-text labels
    - created_at / updated_at: UTC, set on insert; not part of the API payload
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from birdwatch.database import Base

# Upper bound of the INTEGER primary key column
BIRD_ID_MAX = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Bird(Base):
    """
    A single bird record.

    Lifecycle:
        Created by the seed loader (or any external import) before requests
        are served. The API never updates or deletes rows.

    Query Patterns:
        - List all: SELECT ... ORDER BY id  (creation order)
        - Get one:  SELECT ... WHERE id = :id  (primary key lookup)
    """

    __tablename__ = "birds"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Stable identifier assigned on insert, never reused",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Common name, e.g. 'Grackle'",
    )

    species: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Binomial name, e.g. 'Quiscalus Quiscula'",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        comment="When this bird was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
        comment="When this bird was last modified (UTC)",
    )

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Bird(id={self.id}, name='{self.name}', species='{self.species}')>"
