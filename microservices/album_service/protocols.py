"""
Album Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import AlbumRef


# Custom exceptions - defined here to avoid importing repository
class AlbumServiceError(Exception):
    """Base exception for album service errors"""
    pass


class AlbumValidationError(AlbumServiceError):
    """Request body is not well-formed JSON or does not match the album shape"""
    pass


class AlbumNotFoundError(AlbumServiceError):
    """No album matches the requested identifier"""
    pass


class AlbumStorageError(AlbumServiceError):
    """Backend execution or connection failure"""
    pass


class AlbumStartupError(Exception):
    """Fatal bootstrap failure (missing DSN, unreachable backend, schema rejected)"""
    pass


@runtime_checkable
class AlbumRepositoryProtocol(Protocol):
    """
    Interface for Album Repository.

    Implementations must provide these methods.
    Used for dependency injection to enable testing.
    """

    async def ensure_schema(self) -> None:
        """Create the album table if it does not exist"""
        ...

    async def find_by_id(self, album_id: str) -> AlbumRef:
        """Look up an album; raises AlbumNotFoundError or AlbumStorageError"""
        ...

    async def insert(self, album_id: str, name: str, artist: str, price: float) -> None:
        """Insert an album; raises AlbumStorageError"""
        ...

    async def check_connection(self) -> bool:
        """Check database connection"""
        ...

