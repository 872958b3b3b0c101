"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - integration/: Real PostgreSQL (skipped unless TEST_DB_DSN is set)
    - component/  : Component tests (mocked dependencies)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Keep a developer's .env out of test runs
os.environ.setdefault("ENV_FILE", os.path.join(PROJECT_ROOT, "tests", "config", ".env.test"))

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_album_id,
    make_album,
    make_album_create_request,
)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def album_id() -> str:
    """Fresh album ID"""
    return make_album_id()


@pytest.fixture
def album_row() -> dict:
    """Album row as returned by the database"""
    return make_album()


@pytest.fixture
def album_create_payload() -> dict:
    """Valid POST /add body"""
    return make_album_create_request()


@pytest.fixture
def abbey_road_payload() -> dict:
    """The canonical example request body"""
    return {"name": "Abbey Road", "artist": "The Beatles", "price": 9.99}
