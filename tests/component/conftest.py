"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── album_service/   Repository, service and HTTP handler tests
    ├── shared/          Shared infrastructure (database client)
    └── mocks/           Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockAsyncPostgresClient, MockAlbumRepository


# =============================================================================
# Database Mocks
# =============================================================================

@pytest.fixture
def mock_db() -> MockAsyncPostgresClient:
    """Mock PostgreSQL client"""
    return MockAsyncPostgresClient()


@pytest.fixture
def mock_repo() -> MockAlbumRepository:
    """In-memory album repository"""
    return MockAlbumRepository()


@pytest.fixture
def fixed_ids():
    """Deterministic identifier generator yielding predictable UUIDs"""
    issued = []

    def generate() -> str:
        album_id = f"00000000-0000-4000-8000-{len(issued):012d}"
        issued.append(album_id)
        return album_id

    generate.issued = issued
    return generate
