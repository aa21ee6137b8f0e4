from fastapi import Request

from .core.config import Settings


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings
