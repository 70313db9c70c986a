import os
import pytest
from sqlalchemy.exc import OperationalError
from fastapi.testclient import TestClient

# Make sure the database module picks the in-memory sqlite path even when a
# developer shell exports production settings.
os.environ.setdefault("PYTEST_RUNNING", "1")
for _var in ("DATABASE_URL", "CELEBRATION_TEST_DB"):
    os.environ.pop(_var, None)

from celebration.db.database import SessionLocal, engine
from celebration.db import models
from celebration.api.main import app
from celebration.utils.config import refresh_config_cache


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory resets per process)."""
    try:
        models.Base.metadata.create_all(bind=engine)
    except OperationalError as e:
        pytest.exit(f"Failed to create test schema: {e}")
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Empty every table between tests without dropping metadata (faster)."""
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture(autouse=True)
def _fresh_config():
    refresh_config_cache()
    yield
    refresh_config_cache()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)
