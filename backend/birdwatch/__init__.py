"""
Birdwatch API — Application Package Initializer
=================================================

What:  A read-only REST API serving bird records as JSON.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← GET /birds, GET /birds/{id}
    ├─────────────────────────────────────┤
    │          Stores (Data Access)       │  ← BirdStore: SQL or in-memory
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes handle HTTP details and delegate lookups to the injected store.
"""

__version__ = "1.0.0"
