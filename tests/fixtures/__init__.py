"""
Shared Test Fixtures

Centralized factories and generators used across all test layers.

Structure:
    - generators.py: Random data generators
    - {service}_fixtures.py: Per-service factories
"""

# Random generators
from .generators import (
    random_string,
    random_amount,
)

# Album service fixtures
from .album_fixtures import (
    make_album_id,
    make_album,
    make_album_create_request,
)

__all__ = [
    "random_string",
    "random_amount",
    "make_album_id",
    "make_album",
    "make_album_create_request",
]
