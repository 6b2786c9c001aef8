# Static file router — default document and every path not claimed by the API.
# Created: 2026-10-18
#
# Must be included last: the catch-all route matches any path.

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from gallery_server import fs
from gallery_server.api.deps import get_app_settings
from gallery_server.config import Settings
from gallery_server.media import content_type_for

router = APIRouter(tags=["Static"])


async def _serve(rel_path: str, settings: Settings) -> Response:
    data = await fs.read_static(
        settings.resolved_root, rel_path, strict=settings.strict_static_paths
    )
    return Response(content=data, headers={"Content-Type": content_type_for(rel_path)})


@router.get("/", include_in_schema=False)
async def serve_index(settings: Settings = Depends(get_app_settings)):
    """Serve the default document."""
    return await _serve(settings.index_document, settings)


@router.get("/{file_path:path}", include_in_schema=False)
async def serve_file(file_path: str, settings: Settings = Depends(get_app_settings)):
    """Serve the raw bytes of *file_path* relative to the gallery root."""
    return await _serve(file_path, settings)
