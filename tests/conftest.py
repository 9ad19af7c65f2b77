import os

# Set environment variables BEFORE any imports that might use settings
os.environ["ATHENA_TABLE"] = "stocks"
os.environ["ATHENA_SCHEMA"] = ""
os.environ["PARTITION_YEAR_COLUMN"] = "year"
os.environ["PARTITION_MONTH_COLUMN"] = "month"
os.environ["PARTITION_DAY_COLUMN"] = "day"
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_settings
from app.core.config import Settings
from app.main import app


@pytest.fixture(scope="function")
def settings() -> Settings:
    """Settings matching the environment above, editable per test."""
    return Settings(athena_table="stocks")


@pytest.fixture(scope="function")
def client(settings: Settings):
    """Create a test client using the ``settings`` fixture."""
    app.dependency_overrides[get_settings] = lambda: settings

    yield TestClient(app)

    app.dependency_overrides.clear()
