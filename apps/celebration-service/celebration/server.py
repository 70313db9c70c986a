"""Standalone server entry point (``celebration-server``)."""

from __future__ import annotations

import argparse
import logging

import uvicorn
from dotenv import load_dotenv

from celebration.utils.config import get_config, refresh_config_cache

logger = logging.getLogger("celebration.server")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the birthday celebration service")
    parser.add_argument("--host", default=None, help="Bind address (default: SERVER_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: SERVER_PORT or 2022)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    # .env values must be visible before the app module reads its configuration
    load_dotenv()
    refresh_config_cache()
    args = parse_args(argv)
    cfg = get_config()
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO))

    host = args.host or cfg.server_host
    port = args.port or cfg.server_port
    logger.info("🎉 Birthday celebration server for %s listening at %s:%s", cfg.celebrant_name, host, port)
    uvicorn.run(
        "celebration.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=cfg.log_level.lower(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
