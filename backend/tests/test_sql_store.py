"""
Birdwatch API — SQL Store Tests
=================================

What:  Tests for SqlBirdStore against a real (in-memory SQLite) database,
       plus the birds endpoints served through the SQL store.
How:   aiosqlite engine per test; tables created from the ORM metadata and
       filled by the seed loader.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import OperationalError

from birdwatch.exceptions import DatabaseError
from birdwatch.models.bird import Bird
from birdwatch.services.sql_store import SqlBirdStore


class TestSqlBirdStore:

    @pytest.mark.asyncio
    async def test_list_all_returns_creation_order(self, seeded_sql_session):
        store = SqlBirdStore(seeded_sql_session)

        birds = await store.list_all()

        assert [(b.id, b.name, b.species) for b in birds] == [
            (1, "Black-Capped Chickadee", "Poecile Atricapillus"),
            (2, "Grackle", "Quiscalus Quiscula"),
            (3, "Common Starling", "Sturnus Vulgaris"),
            (4, "Mourning Dove", "Zenaida Macroura"),
        ]

    @pytest.mark.asyncio
    async def test_list_all_empty_table(self, sql_session):
        store = SqlBirdStore(sql_session)
        assert await store.list_all() == []

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, seeded_sql_session):
        store = SqlBirdStore(seeded_sql_session)

        bird = await store.get_by_id(2)

        assert bird is not None
        assert bird.name == "Grackle"
        assert bird.species == "Quiscalus Quiscula"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, seeded_sql_session):
        store = SqlBirdStore(seeded_sql_session)
        assert await store.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_timestamps_are_set_on_insert(self, seeded_sql_session):
        bird = await SqlBirdStore(seeded_sql_session).get_by_id(1)
        assert bird.created_at is not None
        assert bird.updated_at is not None

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, seeded_sql_session):
        await seeded_sql_session.execute(delete(Bird).where(Bird.id == 4))
        await seeded_sql_session.commit()

        new_bird = Bird(name="Blue Jay", species="Cyanocitta Cristata")
        seeded_sql_session.add(new_bird)
        await seeded_sql_session.commit()

        assert new_bird.id == 5

    @pytest.mark.asyncio
    async def test_driver_errors_become_database_error(self):
        session = AsyncMock()
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection lost"))
        )
        store = SqlBirdStore(session)

        with pytest.raises(DatabaseError):
            await store.list_all()
        with pytest.raises(DatabaseError):
            await store.get_by_id(1)


class TestBirdsOverSql:
    """The HTTP scenario, served from the SQL store."""

    @pytest.mark.asyncio
    async def test_index(self, sql_client):
        response = await sql_client.get("/birds")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 4
        assert body[0] == {"id": 1, "name": "Black-Capped Chickadee", "species": "Poecile Atricapillus"}
        assert body[1] == {"id": 2, "name": "Grackle", "species": "Quiscalus Quiscula"}

    @pytest.mark.asyncio
    async def test_show(self, sql_client):
        response = await sql_client.get("/birds/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "Grackle", "species": "Quiscalus Quiscula"}

    @pytest.mark.asyncio
    async def test_show_missing(self, sql_client):
        response = await sql_client.get("/birds/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Bird not found"}
