"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
- Should be deterministic
"""

import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def data_dir(temp_dir):
    """Temporary data directory (created lazily by the store)."""
    return temp_dir / "data"


@pytest.fixture
def client():
    """Flask test client around a fresh in-memory session."""
    from app import create_app
    from repositories import MemoryRepository
    from lifewheel import WheelSession

    app = create_app(WheelSession(repository=MemoryRepository()))
    app.config["TESTING"] = True
    return app.test_client()
