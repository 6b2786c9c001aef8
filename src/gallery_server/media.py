# Image allow-list, MIME registry and URI component encoding.
# Created: 2026-10-18

from __future__ import annotations

from pathlib import PurePosixPath
from types import MappingProxyType
from urllib.parse import quote

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp"}
)

DEFAULT_CONTENT_TYPE = "text/plain; charset=utf-8"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

MIME_TYPES = MappingProxyType(
    {
        ".html": "text/html; charset=utf-8",
        ".js": "text/javascript; charset=utf-8",
        ".css": "text/css; charset=utf-8",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".bmp": "image/bmp",
        ".webp": "image/webp",
        ".json": JSON_CONTENT_TYPE,
    }
)

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def extension_of(name: str) -> str:
    """Lower-cased extension of *name* including the dot, or ``""``."""
    return PurePosixPath(name).suffix.lower()


def is_image(name: str) -> bool:
    return extension_of(name) in IMAGE_EXTENSIONS


def content_type_for(path: str) -> str:
    """Content type for *path* by extension, falling back to plain text."""
    return MIME_TYPES.get(extension_of(path), DEFAULT_CONTENT_TYPE)


def encode_uri_component(value: str) -> str:
    """Percent-encode *value* the way browsers' ``encodeURIComponent`` does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)
