"""
Album Service Business Logic

Album record business logic layer for the microservice.
Generates identifiers and delegates persistence to the repository.

Uses dependency injection for testability:
- Repository is injected, not created at import time
- Identifier generator is injectable
"""

import logging
import uuid
from typing import Callable, Optional

from pydantic import ValidationError

# Import protocols (no I/O dependencies) - NOT the concrete repository!
from .protocols import AlbumRepositoryProtocol, AlbumNotFoundError, AlbumValidationError
from .models import Album, AlbumCreateRequest, AlbumIDResponse

logger = logging.getLogger(__name__)


def generate_album_id() -> str:
    """Random 128-bit identifier in canonical UUID form"""
    return str(uuid.uuid4())


# ==================== Album Service ====================

class AlbumService:
    """
    Album record business logic service

    Handles album creation and lookup while delegating data access
    to the repository layer.
    """

    def __init__(
        self,
        repository: AlbumRepositoryProtocol,
        id_generator: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize service with injected dependencies.

        Args:
            repository: Repository (inject mock for testing)
            id_generator: Identifier factory (defaults to generate_album_id)
        """
        self.repo = repository
        self.id_generator = id_generator or generate_album_id

    def parse_create_request(self, body: bytes) -> AlbumCreateRequest:
        """
        Decode a raw album creation body

        The body is decoded as JSON whatever Content-Type the client sent.

        Raises:
            AlbumValidationError: If the body is not JSON or does not match the album shape
        """
        try:
            return AlbumCreateRequest.model_validate_json(body)
        except ValidationError as e:
            logger.info(f"Invalid album payload: {e.errors(include_url=False)}")
            raise AlbumValidationError("Invalid JSON data") from e

    async def create_album(self, request: AlbumCreateRequest) -> AlbumIDResponse:
        """
        Create a new album

        Args:
            request: Validated album creation request

        Returns:
            AlbumIDResponse: Identifier of the created album

        Raises:
            AlbumStorageError: If the insert fails
        """
        album = Album(
            album_id=self.id_generator(),
            name=request.name,
            artist=request.artist,
            price=request.price,
        )

        await self.repo.insert(album.album_id, album.name, album.artist, album.price)

        logger.info(f"Album created: {album.album_id}")
        return AlbumIDResponse(album_id=album.album_id)

    async def get_album(self, album_id: str) -> AlbumIDResponse:
        """
        Get album by ID

        Only the identifier is returned; the stored fields are not.

        Raises:
            AlbumNotFoundError: If album not found
            AlbumStorageError: If the lookup fails
        """
        try:
            album = await self.repo.find_by_id(album_id)
        except AlbumNotFoundError:
            logger.info(f"Album not found: {album_id}")
            raise

        return AlbumIDResponse(album_id=album.album_id)

    async def ensure_schema(self) -> None:
        """Make sure the album table exists before serving traffic"""
        await self.repo.ensure_schema()

    async def check_connection(self) -> bool:
        """Check database connection"""
        return await self.repo.check_connection()
