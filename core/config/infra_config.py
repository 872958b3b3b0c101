#!/usr/bin/env python3
"""Infrastructure configuration

Relational backend used by the album service (PostgreSQL via asyncpg).
"""
import os
from dataclasses import dataclass
from typing import Optional

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class InfraConfig:
    """Database connection settings"""

    # ===========================================
    # PostgreSQL (native asyncpg)
    # ===========================================
    database_dsn: Optional[str] = None
    pool_min_size: int = 1
    pool_max_size: int = 10
    statement_timeout: float = 5.0

    # Table holding album records
    album_table: str = "albums"

    @property
    def database_configured(self) -> bool:
        return bool(self.database_dsn)

    @classmethod
    def from_env(cls) -> 'InfraConfig':
        """Load infrastructure config from environment"""
        return cls(
            database_dsn=os.getenv("DB_DSN") or None,
            pool_min_size=_int(os.getenv("DB_POOL_MIN_SIZE", "1"), 1),
            pool_max_size=_int(os.getenv("DB_POOL_MAX_SIZE", "10"), 10),
            statement_timeout=_float(os.getenv("DB_STATEMENT_TIMEOUT", "5.0"), 5.0),
            album_table=os.getenv("ALBUM_TABLE", "albums"),
        )
