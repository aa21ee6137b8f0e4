"""Command line entry point: ``filedrop`` / ``python -m filedrop_backend``."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from .app.core.config import Settings
from .app.main import create_app
from .app.storage import ensure_storage_dir

logger = logging.getLogger("filedrop.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filedrop",
        description="Serve file uploads to a local directory and list them as JSON.",
    )
    parser.add_argument("--host", help="interface to bind (env FILEDROP_HOST, default 0.0.0.0)")
    parser.add_argument("--port", type=int, help="TCP port (env FILEDROP_PORT, default 8080)")
    parser.add_argument("--storage-dir", help="upload directory (env STORAGE_DIR, default /data)")
    parser.add_argument("--static-dir", help="static asset directory (env STATIC_DIR, default ./static)")
    parser.add_argument("--log-level", help="logging level (env LOG_LEVEL, default INFO)")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        storage_dir=args.storage_dir,
        static_dir=args.static_dir,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ensure_storage_dir(settings.STORAGE_DIR)
    except OSError as e:
        logger.error("Cannot create storage directory %s: %s", settings.STORAGE_DIR, e)
        return 1

    logger.info("Listening on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0
