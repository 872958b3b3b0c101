#!/usr/bin/env python3
"""
Service logger setup

Configures standard-library logging once per process from LoggingConfig.

Usage:
    from core.logger import setup_service_logger
    logger = setup_service_logger("album_service")
"""

import logging
import sys
from typing import Optional

from .config import LoggingConfig

_configured_services = set()


def setup_service_logger(service_name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging for a service and return its logger.

    Args:
        service_name: Name used for the returned logger
        level: Optional level override (defaults to LOG_LEVEL)

    Returns:
        logging.Logger named after the service
    """
    config = LoggingConfig.from_env(service_name)
    log_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)

    if service_name not in _configured_services:
        formatter = logging.Formatter(config.log_format)
        root = logging.getLogger()
        handlers = []

        if config.enable_console:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            handlers.append(console)

        if config.log_file:
            file_handler = logging.FileHandler(config.log_file)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        for handler in handlers:
            root.addHandler(handler)
        _configured_services.add(service_name)

    logging.getLogger().setLevel(log_level)
    service_logger = logging.getLogger(service_name)
    service_logger.setLevel(log_level)
    return service_logger
