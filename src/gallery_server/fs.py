"""Filesystem access for the gallery.

Every blocking call runs in a worker thread via ``asyncio.to_thread`` so a
slow disk only stalls the request waiting on it.  Folder arguments are
already percent-decoded (the ASGI server decodes the request path) and are
resolved against the gallery root, never against the process cwd.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from gallery_server.errors import FolderReadError, IllegalPathError, StaticFileNotFound
from gallery_server.media import encode_uri_component, is_image


def is_inside(path: Path, root: Path, follow_symlinks: bool = False) -> bool:
    """True if *path* is *root* or lies below it.

    By default only the path text is normalised, so a symlink placed inside
    the root counts as inside.  With *follow_symlinks* both sides are resolved.
    """
    if follow_symlinks:
        return path.resolve().is_relative_to(root.resolve())
    return Path(os.path.abspath(path)).is_relative_to(os.path.abspath(root))


def resolve_folder(root: Path, folder: str) -> Path:
    """Absolute path of a client-supplied *folder* under *root*.

    Raises ``IllegalPathError`` if the result escapes the root.
    """
    target = Path(os.path.abspath(root / folder))
    if not is_inside(target, root):
        raise IllegalPathError(folder)
    return target


def _scan(directory: Path, keep) -> list[str]:
    # Entry type checks run one after another inside this worker thread.
    with os.scandir(directory) as entries:
        return [entry.name for entry in entries if keep(entry)]


def _is_directory(entry: os.DirEntry) -> bool:
    return entry.is_dir()


def _is_image_entry(entry: os.DirEntry) -> bool:
    return is_image(entry.name)


async def _listing(root: Path, folder: str | None, keep) -> list[str]:
    label = "." if folder is None else folder
    if folder == "":
        raise FolderReadError(folder, "No such file or directory: ''")

    try:
        directory = root if folder is None else resolve_folder(root, folder)
        return await asyncio.to_thread(_scan, directory, keep)
    except (OSError, ValueError) as exc:
        raise FolderReadError(label, str(exc)) from exc


async def list_directories(root: Path, folder: str | None = None) -> list[str]:
    """Names of the immediate subdirectories of *folder* (or of *root*)."""
    return await _listing(root, folder, _is_directory)


async def list_images(root: Path, folder: str | None = None) -> list[str]:
    """Image files directly inside *folder* (or *root*).

    Root listings return bare file names.  Folder listings return
    ``<encoded folder>/<encoded name>`` so clients can fetch them as-is.
    """
    names = await _listing(root, folder, _is_image_entry)
    if folder is None:
        return names
    prefix = encode_uri_component(folder)
    return [f"{prefix}/{encode_uri_component(name)}" for name in names]


async def read_static(root: Path, rel_path: str, strict: bool = False) -> bytes:
    """Read the file at *rel_path* below *root*.

    Any failure is reported as ``StaticFileNotFound``.  With *strict*, paths
    escaping the root are refused the same way.
    """
    display_path = f"./{rel_path}"
    target = root / rel_path.lstrip("/")

    try:
        if strict and not is_inside(target, root, follow_symlinks=True):
            raise StaticFileNotFound(display_path, "outside gallery root")
        return await asyncio.to_thread(target.read_bytes)
    except (OSError, ValueError) as exc:
        raise StaticFileNotFound(display_path, str(exc)) from exc
