"""Gallery Server application factory and runner.

Builds the FastAPI app: listing routes under ``/api/`` first, then the static
catch-all.  Domain errors from ``gallery_server.fs`` are turned into the
plain-text 500/404 bodies clients expect.

Changes:
  - 2026-10-18: Interactive API docs disabled so every non-API path reaches the static handler.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from gallery_server.config import Settings, get_settings
from gallery_server.errors import FolderReadError, StaticFileNotFound

logger = logging.getLogger(__name__)


async def folder_read_error_handler(request: Request, exc: FolderReadError):
    logger.warning("Listing %s failed: %s", exc.folder, exc.message)
    return PlainTextResponse(f"Error reading directory: {exc.message}", status_code=500)


async def static_not_found_handler(request: Request, exc: StaticFileNotFound):
    logger.debug("Static read %s failed: %s", exc.display_path, exc.reason)
    return PlainTextResponse(str(exc), status_code=404)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the gallery FastAPI application."""
    from gallery_server.api import listing, static

    app = FastAPI(
        title="Gallery Server",
        description="Browse a directory tree of images over HTTP.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings if settings is not None else get_settings()

    app.add_exception_handler(FolderReadError, folder_read_error_handler)
    app.add_exception_handler(StaticFileNotFound, static_not_found_handler)

    # Order is the routing precedence.
    app.include_router(listing.router)
    app.include_router(static.router)

    return app


def run_server(settings: Settings, dev: bool = False) -> None:
    """Start the gallery server with uvicorn."""
    import uvicorn

    host, port = settings.host, settings.port

    print("\n" + "=" * 50)
    print("\U0001f5bc  GALLERY SERVER")
    print("=" * 50)
    print(f"\n\U0001f4c1 Serving {settings.resolved_root}")
    if dev:
        print("\U0001f504 Development mode — auto-reload enabled")
    if host == "0.0.0.0":
        import socket

        try:
            s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            s.connect(("8.8.8.8", 80))
            local_ip = s.getsockname()[0]
            s.close()
        except OSError:
            local_ip = "<your-server-ip>"
        print(f"\U0001f310 Server running at: http://{local_ip}:{port}/")
        print(f"   (listening on all interfaces — {host}:{port})\n")
    else:
        print(f"\U0001f310 Server running at: http://localhost:{port}/\n")

    if dev:
        import pathlib

        # The reloader builds the app from the environment.
        os.environ["GALLERY_ROOT_DIR"] = str(settings.resolved_root)
        os.environ["GALLERY_INDEX_DOCUMENT"] = settings.index_document
        os.environ["GALLERY_STRICT_STATIC_PATHS"] = str(settings.strict_static_paths)

        src_dir = str(pathlib.Path(__file__).resolve().parent)
        uvicorn.run(
            "gallery_server.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
        )
    else:
        config = uvicorn.Config(create_app(settings), host=host, port=port)
        server = uvicorn.Server(config)
        server.run()
