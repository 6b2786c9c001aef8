# Gallery error types.
# Created: 2026-10-18
#
# Raised by fs.py, mapped to plain-text HTTP responses by the handlers in app.py.

from __future__ import annotations


class GalleryError(Exception):
    """Base class for errors surfaced to HTTP clients."""


class FolderReadError(GalleryError):
    """A directory or image listing could not be produced."""

    def __init__(self, folder: str, message: str):
        super().__init__(message)
        self.folder = folder
        self.message = message


class IllegalPathError(FolderReadError):
    """The requested folder resolves outside the gallery root."""

    def __init__(self, folder: str):
        super().__init__(folder, "Illegal path access")


class StaticFileNotFound(GalleryError):
    """A static file could not be read."""

    def __init__(self, display_path: str, reason: str = ""):
        super().__init__(f"File {display_path} not found!")
        self.display_path = display_path
        self.reason = reason
