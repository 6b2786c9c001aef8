# Shared FastAPI dependencies for the gallery API.
# Created: 2026-10-18

from __future__ import annotations

from pathlib import Path

from fastapi import Request

from gallery_server.config import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with, or the process-wide ones."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


def get_gallery_root(request: Request) -> Path:
    """Resolved gallery root for the current app."""
    return get_app_settings(request).resolved_root
