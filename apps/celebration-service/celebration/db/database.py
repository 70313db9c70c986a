"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes the FastAPI session dependency.
"""
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

POSTGRES_ENV_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


def _get_database_url() -> str:
    """DATABASE_URL when set, else a postgres URL assembled from POSTGRES_*."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    parts = {name: os.getenv(name) for name in POSTGRES_ENV_VARS}
    missing = [name for name, value in parts.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{parts['POSTGRES_USER']}:{parts['POSTGRES_PASSWORD']}"
        f"@{parts['POSTGRES_HOST']}:{parts['POSTGRES_PORT']}/{parts['POSTGRES_DB']}"
    )


def _is_pytest_runtime() -> bool:
    # collection imports this module before PYTEST_CURRENT_TEST exists
    return (
        os.getenv("PYTEST_RUNNING") == "1"
        or "PYTEST_CURRENT_TEST" in os.environ
        or "pytest" in sys.modules
    )


# Test override strategy:
# 1. If CELEBRATION_TEST_DB is set, use it.
# 2. Else if TEST_DATABASE_URL (e2e) is set, use it.
# 3. Else under pytest, use in-memory sqlite.
# 4. Else build the production URL from the environment.
explicit_test_db = os.getenv("CELEBRATION_TEST_DB")
explicit_e2e_db = os.getenv("TEST_DATABASE_URL")

if explicit_test_db:
    DATABASE_URL = explicit_test_db
    _engine_kwargs = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
elif explicit_e2e_db:
    DATABASE_URL = explicit_e2e_db
    _engine_kwargs = {}
elif _is_pytest_runtime():
    # StaticPool keeps a single connection so the in-memory schema persists
    DATABASE_URL = "sqlite+pysqlite:///:memory:"
    _engine_kwargs = {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }
else:
    DATABASE_URL = _get_database_url()
    _engine_kwargs = {"pool_pre_ping": True}

engine = create_engine(DATABASE_URL, **_engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_sqlite_schema(bind=None) -> bool:
    """Create all tables when running against SQLite.

    Postgres schemas are owned by Alembic migrations; SQLite (tests and local
    throwaway runs) has no migration history so the metadata is created
    directly. Returns True when tables were created.
    """
    bind = bind or engine
    if not str(bind.url).startswith("sqlite"):
        return False
    from celebration.db import models  # local import to avoid a cycle at module load
    models.Base.metadata.create_all(bind=bind)
    return True


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
