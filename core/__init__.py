#!/usr/bin/env python3
"""
Core Module for Microservices Architecture

Shared infrastructure components for the microservices in this repository.

COMPONENTS:
    - config/: Modular configuration (service, infrastructure, logging)
    - config_manager.py: Per-service configuration access
    - logger.py: Service logger setup
    - postgres_client.py: asyncpg pool-backed PostgreSQL client

USAGE:
    from core.config_manager import ConfigManager
    from core.logger import setup_service_logger

    config = ConfigManager("album_service").get_service_config()
    logger = setup_service_logger("album_service")
"""

from .config_manager import ConfigManager, ServiceSettings
from .logger import setup_service_logger
from .postgres_client import AsyncPostgresClient, PostgresNotConnectedError

__all__ = [
    "ConfigManager",
    "ServiceSettings",
    "setup_service_logger",
    "AsyncPostgresClient",
    "PostgresNotConnectedError",
]

__version__ = "1.0.0"
