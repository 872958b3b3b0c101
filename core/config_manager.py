#!/usr/bin/env python3
"""
Configuration Manager

Centralized, per-service view over the modular configuration in core.config.

Usage:
    from core.config_manager import ConfigManager

    config_manager = ConfigManager("album_service")
    config = config_manager.get_service_config()
    print(config.service_port, config.database_dsn)
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import InfraConfig, LoggingConfig, ServiceConfig

logger = logging.getLogger(__name__)

_DSN_PASSWORD = re.compile(r"(://[^:/@]+):([^@]*)@")


@dataclass
class ServiceSettings:
    """Flattened settings consumed by a microservice process"""
    service_name: str
    service_host: str
    service_port: int
    debug: bool
    log_level: str
    log_format: str
    database_dsn: Optional[str]
    pool_min_size: int
    pool_max_size: int
    statement_timeout: float
    album_table: str


def mask_dsn(dsn: Optional[str]) -> str:
    """Hide the password part of a connection string"""
    if not dsn:
        return "<not set>"
    return _DSN_PASSWORD.sub(r"\1:***@", dsn)


class ConfigManager:
    """Loads and caches configuration for a single service"""

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.service = ServiceConfig.from_env(service_name)
        self.infra = InfraConfig.from_env()
        self.logging = LoggingConfig.from_env(service_name)
        self._settings: Optional[ServiceSettings] = None

    def get_service_config(self) -> ServiceSettings:
        """Get the flattened settings for this service"""
        if self._settings is None:
            self._settings = ServiceSettings(
                service_name=self.service_name,
                service_host=self.service.service_host,
                service_port=self.service.service_port,
                debug=self.service.debug,
                log_level=self.logging.log_level,
                log_format=self.logging.log_format,
                database_dsn=self.infra.database_dsn,
                pool_min_size=self.infra.pool_min_size,
                pool_max_size=self.infra.pool_max_size,
                statement_timeout=self.infra.statement_timeout,
                album_table=self.infra.album_table,
            )
        return self._settings

    def get_config_summary(self, show_secrets: bool = False) -> Dict[str, Any]:
        """Summarize the effective configuration"""
        settings = self.get_service_config()
        return {
            "service_name": settings.service_name,
            "host": settings.service_host,
            "port": settings.service_port,
            "debug": settings.debug,
            "log_level": settings.log_level,
            "database_dsn": settings.database_dsn if show_secrets else mask_dsn(settings.database_dsn),
            "pool": f"{settings.pool_min_size}-{settings.pool_max_size}",
            "statement_timeout": settings.statement_timeout,
            "album_table": settings.album_table,
        }

    def print_config_summary(self, show_secrets: bool = False):
        """Log the effective configuration (development aid)"""
        for key, value in self.get_config_summary(show_secrets=show_secrets).items():
            logger.info(f"[{self.service_name}] {key}: {value}")
