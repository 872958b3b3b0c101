"""
Album Microservice

Album record service: create album records and look them up by id.

Port: 8080 (PORT)
"""

import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from core.config_manager import ConfigManager
from core.logger import setup_service_logger

from .album_service import AlbumService
from .factory import create_album_service, create_postgres_client
from .models import (
    AlbumCreateRequest,
    AlbumIDResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from .protocols import (
    AlbumNotFoundError,
    AlbumStartupError,
    AlbumStorageError,
    AlbumValidationError,
)

# Initialize configuration
config_manager = ConfigManager("album_service")
service_config = config_manager.get_service_config()

# Setup loggers
app_logger = setup_service_logger("album_service", level=service_config.log_level)
logger = app_logger

INVALID_JSON = {"error": "Invalid JSON data"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    logger.info("Starting Album Service...")

    if service_config.debug:
        config_manager.print_config_summary(show_secrets=False)

    if not service_config.database_dsn:
        logger.critical("DB_DSN environment variable not set")
        raise AlbumStartupError("DB_DSN environment variable not set")

    db = create_postgres_client(service_config)
    try:
        await db.connect()
    except Exception as e:
        logger.critical(f"Failed to connect to DB: {e}")
        raise AlbumStartupError(f"Failed to connect to DB: {e}") from e

    try:
        try:
            album_service = create_album_service(service_config, db)
            await album_service.ensure_schema()
        except (ValueError, AlbumStorageError) as e:
            logger.critical(f"Failed to create table: {e}")
            raise AlbumStartupError(f"Failed to create table: {e}") from e

        if await album_service.check_connection():
            logger.info("Database connection healthy")
        else:
            logger.warning("Database health check failed; serving anyway")

        app.state.album_service = album_service
        logger.info(f"Server starting on port {service_config.service_port} ...")

        yield

        app.state.album_service = None
    finally:
        await db.close()

    logger.info("Album Service stopped")


# Initialize FastAPI app
app = FastAPI(
    title="Album Service",
    description="Album record creation and lookup",
    version="1.0.0",
    lifespan=lifespan,
)


# ==================== Dependency Injection ====================


def get_album_service(request: Request) -> AlbumService:
    """Get the album service bound to this application"""
    album_service = getattr(request.app.state, "album_service", None)
    if album_service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return album_service


# ==================== Error Handlers ====================


@app.exception_handler(AlbumValidationError)
async def album_validation_error_handler(request: Request, exc: AlbumValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=INVALID_JSON)


# ==================== Health Check ====================


@app.get("/count", response_model=HealthResponse)
async def health_check():
    """Health check endpoint (does not touch the database)"""
    return HealthResponse(status="ok")


# ==================== Album Management ====================


@app.get(
    "/album/{album_id}",
    response_model=AlbumIDResponse,
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def get_album(
    album_id: str,
    service: AlbumService = Depends(get_album_service),
):
    """
    Get album by ID

    Args:
        album_id: Album ID

    Returns:
        The album ID, confirming the album exists
    """
    logger.info(f"Received GET request for albumID: {album_id}")
    try:
        return await service.get_album(album_id)
    except AlbumNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "Album not found"},
        )
    except AlbumStorageError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Error fetching album"},
        )


@app.post(
    "/add",
    response_model=AlbumIDResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": AlbumCreateRequest.model_json_schema()}},
        }
    },
)
async def create_album(
    request: Request,
    service: AlbumService = Depends(get_album_service),
):
    """
    Create a new album

    The body is read as JSON regardless of the Content-Type header.

    Returns:
        The generated album ID
    """
    album_request = service.parse_create_request(await request.body())
    try:
        return await service.create_album(album_request)
    except AlbumStorageError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to insert album into database"},
        )


# ==================== Run Server ====================


def main():
    """Console entry point"""
    if not service_config.database_dsn:
        logger.critical("DB_DSN environment variable not set")
        sys.exit(1)

    uvicorn.run(
        "microservices.album_service.main:app",
        host=service_config.service_host,
        port=service_config.service_port,
        reload=service_config.debug,
        log_level=service_config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
