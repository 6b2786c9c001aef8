# Listing router — subdirectories and images of the gallery root or a folder.
# Created: 2026-10-18
#
# Registration order matters: /api/images/{folder} is declared before the
# bare /api/images route, and the static catch-all is mounted after this router.

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends

from gallery_server import fs
from gallery_server.api.deps import get_gallery_root
from gallery_server.api.responses import PrettyJSONResponse

router = APIRouter(prefix="/api", tags=["Listing"], default_response_class=PrettyJSONResponse)


@router.get("/directories")
async def list_root_directories(root: Path = Depends(get_gallery_root)) -> list[str]:
    """Subdirectories of the gallery root."""
    return await fs.list_directories(root)


@router.get("/subdirectories/{folder:path}")
async def list_subdirectories(folder: str, root: Path = Depends(get_gallery_root)) -> list[str]:
    """Subdirectories of *folder*, which must lie inside the gallery root."""
    return await fs.list_directories(root, folder)


@router.get("/images/{folder:path}")
async def list_folder_images(folder: str, root: Path = Depends(get_gallery_root)) -> list[str]:
    """Images in *folder* as ready-to-fetch ``folder/name`` paths."""
    return await fs.list_images(root, folder)


@router.get("/images")
async def list_root_images(root: Path = Depends(get_gallery_root)) -> list[str]:
    """Images in the gallery root as bare file names."""
    return await fs.list_images(root)
