"""
App assembly entry point.

Re-exports the FastAPI `app` from `celebration.api.main` so the service can be
started with ``uvicorn app:app`` from this directory.
"""

from celebration.api.main import app  # noqa: F401
