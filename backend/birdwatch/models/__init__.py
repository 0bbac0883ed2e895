"""ORM models registered on birdwatch.database.Base."""
