"""Application configuration settings.

Values can be overridden via environment variables or passed explicitly
when building an app for tests or the command line.
"""
import os
from typing import List, Optional


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings:
    def __init__(
        self,
        storage_dir: Optional[str] = None,
        static_dir: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
        cors_origins: Optional[List[str]] = None,
    ):
        # Where uploads are written and listings are read from
        self.STORAGE_DIR: str = storage_dir or os.getenv("STORAGE_DIR", "/data")
        # Static assets served for every path that is not an API route
        self.STATIC_DIR: str = static_dir or os.getenv("STATIC_DIR", "./static")

        # Listener
        self.HOST: str = host or os.getenv("FILEDROP_HOST", "0.0.0.0")
        self.PORT: int = port if port is not None else int(os.getenv("FILEDROP_PORT", "8080"))

        self.LOG_LEVEL: str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

        if cors_origins is None:
            cors_origins = _split_origins(os.getenv("CORS_ORIGINS", "*"))
        self.CORS_ORIGINS: List[str] = cors_origins

    def __repr__(self) -> str:
        return (
            f"Settings(storage_dir={self.STORAGE_DIR!r}, static_dir={self.STATIC_DIR!r}, "
            f"host={self.HOST!r}, port={self.PORT})"
        )


settings = Settings()
