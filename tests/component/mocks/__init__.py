"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (database, repository).
"""

from .db_mock import MockAsyncPostgresClient
from .album_mock import MockAlbumRepository

__all__ = [
    'MockAsyncPostgresClient',
    'MockAlbumRepository',
]
