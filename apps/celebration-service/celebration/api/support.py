"""
Health and build information endpoints.
"""
from __future__ import annotations

import os
from datetime import datetime, timezone

from fastapi import APIRouter

from celebration.utils.config import get_config

router = APIRouter(tags=["support"])


@router.get("/healthcheck", operation_id="healthcheck")
def healthcheck():
    return {
        "status": "ok",
        "service": get_config().service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/build-info")
def get_build_info():
    """Return build and deployment information for the running service."""
    build_sha = os.getenv("BUILD_SHA")
    build_timestamp = os.getenv("BUILD_TIMESTAMP")
    image_tag = os.getenv("IMAGE_TAG")
    version = os.getenv("VERSION", "unknown")

    return {
        "build_sha": build_sha if build_sha else None,
        "build_timestamp": build_timestamp if build_timestamp else None,
        "image_tag": image_tag if image_tag else None,
        "service_name": get_config().service_name,
        "version": version,
    }
