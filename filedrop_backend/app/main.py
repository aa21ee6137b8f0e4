# filedrop_backend/app/main.py
from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .core.config import Settings, settings as default_settings
from .errors import register_error_handlers
from .routers import files as files_router
from .routers import health as health_router

logger = logging.getLogger("filedrop.main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title="FileDrop", version="0.1.0")
    app.state.settings = settings

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # API routes first; the static mount below catches everything else
    app.include_router(files_router.router)
    app.include_router(health_router.router)

    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; serving API routes only", settings.STATIC_DIR)

    @app.on_event("startup")
    async def on_startup():
        logger.info(
            "FileDrop ready: storage=%s static=%s", settings.STORAGE_DIR, settings.STATIC_DIR
        )

    @app.on_event("shutdown")
    async def on_shutdown():
        logger.info("FileDrop shutdown")

    return app


app = create_app()
