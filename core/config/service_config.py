#!/usr/bin/env python3
"""Service configuration

HTTP listener settings for a microservice process.
"""
import os
from dataclasses import dataclass

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class ServiceConfig:
    """HTTP listener settings"""

    service_name: str = "album_service"
    service_host: str = "0.0.0.0"
    service_port: int = 8080
    debug: bool = False

    @classmethod
    def from_env(cls, service_name: str = "album_service") -> 'ServiceConfig':
        """Load service configuration from environment variables"""
        return cls(
            service_name=service_name,
            service_host=os.getenv("HOST", "0.0.0.0"),
            service_port=_int(os.getenv("PORT", "8080"), 8080),
            debug=_bool(os.getenv("DEBUG", "false")),
        )
