"""
Album Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that imports I/O-dependent modules (repository, database client).

Usage:
    from .factory import create_postgres_client, create_album_service
    db = create_postgres_client(config)
    service = create_album_service(config, db)
"""
from typing import Callable, Optional

from core.config_manager import ServiceSettings
from core.postgres_client import AsyncPostgresClient

from .album_service import AlbumService


def create_postgres_client(config: ServiceSettings) -> AsyncPostgresClient:
    """
    Create the pool-backed PostgreSQL client for the album service.

    Args:
        config: Service settings carrying DSN, pool bounds and timeout

    Returns:
        AsyncPostgresClient: Client, not yet connected
    """
    return AsyncPostgresClient(
        dsn=config.database_dsn,
        service_name=config.service_name,
        min_size=config.pool_min_size,
        max_size=config.pool_max_size,
        statement_timeout=config.statement_timeout,
    )


def create_album_service(
    config: ServiceSettings,
    db: AsyncPostgresClient,
    id_generator: Optional[Callable[[], str]] = None,
) -> AlbumService:
    """
    Create AlbumService with real dependencies.

    This function imports the real repository (which has I/O dependencies).
    Use this in production, NOT in tests.

    Args:
        config: Service settings (album table name)
        db: PostgreSQL client shared by all requests
        id_generator: Optional identifier factory override

    Returns:
        AlbumService: Configured service instance with real repository

    Raises:
        ValueError: If the configured table name is invalid
    """
    # Import real repository here (not at module level)
    from .album_repository import AlbumRepository

    repository = AlbumRepository(db, table=config.album_table)

    return AlbumService(
        repository=repository,
        id_generator=id_generator,
    )
