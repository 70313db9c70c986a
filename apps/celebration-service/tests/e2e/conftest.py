import os
import shutil
import subprocess
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from alembic import command
from alembic.config import Config

SERVICE_ROOT = Path(__file__).resolve().parents[2]


def _docker_available() -> bool:
    if os.getenv("SKIP_DOCKER_TESTS") == "1":
        return False
    if not shutil.which("docker"):
        return False
    try:
        proc = subprocess.run(["docker", "info"], capture_output=True, text=True, timeout=5)
    except Exception:
        return False
    return proc.returncode == 0


def alembic_config(db_url: str) -> Config:
    """Alembic Config bound to the service's alembic.ini with the URL overridden."""
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


@pytest.fixture(scope="session")
def postgres_url(tmp_path_factory):
    """Session-wide Postgres container; skips when Docker is unavailable."""
    if not _docker_available():
        pytest.skip("Docker daemon is not available; skipping e2e tests that require containers")
    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image, driver="psycopg2") as pg:
        url = pg.get_connection_url()
        # env.py prefers TEST_DATABASE_URL over the ini value
        previous = os.environ.get("TEST_DATABASE_URL")
        os.environ["TEST_DATABASE_URL"] = url
        try:
            yield url
        finally:
            if previous is None:
                os.environ.pop("TEST_DATABASE_URL", None)
            else:
                os.environ["TEST_DATABASE_URL"] = previous


@pytest.fixture
def migrated_pg(postgres_url):
    """Upgrade to head for the test and downgrade to base afterwards."""
    cfg = alembic_config(postgres_url)
    command.upgrade(cfg, "head")
    yield postgres_url
    command.downgrade(cfg, "base")


@pytest.fixture
def pg_client(migrated_pg):
    """TestClient whose get_db dependency is bound to the migrated Postgres database."""
    from fastapi.testclient import TestClient
    from celebration.api.main import app
    from celebration.db.database import get_db

    pg_engine = create_engine(migrated_pg, future=True)
    PgSession = sessionmaker(bind=pg_engine, autoflush=False, autocommit=False)

    def _override_get_db():
        session = PgSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
        pg_engine.dispose()


@pytest.fixture
def alembic_cfg_factory():
    return alembic_config
