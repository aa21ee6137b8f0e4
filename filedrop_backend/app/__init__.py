"""
FileDrop Backend Package

This package contains the FastAPI application that stores uploaded files on
local disk and lists them as JSON.
"""

from .main import app, create_app  # noqa: F401
