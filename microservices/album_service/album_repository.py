"""
Album Repository - Data access layer for album service
Handles database operations for album records

Uses AsyncPostgresClient (asyncpg pool) for PostgreSQL access.
All statements bind values as parameters ($1, $2, ...); only the table name,
which comes from configuration, is placed in the SQL text.
"""

import logging
import re

from core.postgres_client import AsyncPostgresClient
from .models import AlbumRef
from .protocols import AlbumNotFoundError, AlbumStorageError

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,62}$")


class AlbumRepository:
    """Album repository - data access layer for album operations"""

    def __init__(self, db: AsyncPostgresClient, table: str = "albums"):
        """
        Initialize album repository.

        Args:
            db: Connected (or about to be connected) PostgreSQL client
            table: Album table name, must be a plain SQL identifier

        Raises:
            ValueError: If the table name is not a plain identifier
        """
        if not _IDENTIFIER.match(table or ""):
            raise ValueError(f"Invalid album table name: {table!r}")
        self.db = db
        self.albums_table = table

    # ==================== Schema ====================

    async def ensure_schema(self) -> None:
        """Create the album table if it does not exist (idempotent)"""
        query = f"""
            CREATE TABLE IF NOT EXISTS {self.albums_table} (
                album_id VARCHAR(255) PRIMARY KEY,
                name VARCHAR(255),
                artist VARCHAR(255),
                price DOUBLE PRECISION,
                image BYTEA
            )
        """
        try:
            await self.db.execute(query)
        except Exception as e:
            logger.error(f"Error ensuring album table {self.albums_table}: {e}")
            raise AlbumStorageError(f"Failed to create table {self.albums_table}") from e

        logger.info(f"Album table ready: {self.albums_table}")

    # ==================== Album Operations ====================

    async def find_by_id(self, album_id: str) -> AlbumRef:
        """Get album reference by album_id"""
        # PostgreSQL text cannot hold NUL, and issued ids never contain it
        if "\x00" in album_id:
            raise AlbumNotFoundError(f"Album not found: {album_id!r}")

        query =f"SELECT album_id FROM {self.albums_table} WHERE album_id = $1"
        try:
            result = await self.db.query_row(query, [album_id])
        except Exception as e:
            logger.error(f"Error getting album by ID {album_id}: {e}")
            raise AlbumStorageError(f"Failed to fetch album {album_id}") from e

        if result is None:
            raise AlbumNotFoundError(f"Album not found: {album_id}")
        return AlbumRef.model_validate(result)

    async def insert(self, album_id: str, name: str, artist: str, price: float) -> None:
        """Insert a new album; image is left unset"""
        query = f"""
            INSERT INTO {self.albums_table} (album_id, name, artist, price)
            VALUES ($1, $2, $3, $4)
        """
        try:
            await self.db.execute(query, [album_id, name, artist, price])
        except Exception as e:
            logger.error(f"Error inserting album {album_id}: {e}")
            raise AlbumStorageError(f"Failed to insert album {album_id}") from e

    # ==================== Utility Methods ====================

    async def check_connection(self) -> bool:
        """Check database connection"""
        return await self.db.health_check()
