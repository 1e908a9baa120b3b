"""
Pytest configuration and shared fixtures.
Points the application at an in-memory SQLite database and ensures the
project root is in sys.path for imports.
"""

import os
import sys
from pathlib import Path

# Must happen before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from domain.models import Base, engine


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test an empty schema"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
