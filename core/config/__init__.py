#!/usr/bin/env python3
"""Modular configuration system

Configuration hierarchy:
- infra_config: relational backend (PostgreSQL DSN, pool, timeouts, table)
- service_config: HTTP listener (host, port, debug)
- logging_config: logging level, format and handlers

An optional env file (``ENV_FILE``, default ``.env``) is loaded on import.
Values already present in the process environment win.
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .infra_config import InfraConfig
from .service_config import ServiceConfig

load_dotenv(os.getenv("ENV_FILE", ".env"), override=False)

__all__ = [
    'LoggingConfig',
    'InfraConfig',
    'ServiceConfig',
]
