# Response classes for the gallery API.
# Created: 2026-10-18

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse

from gallery_server.media import JSON_CONTENT_TYPE


class PrettyJSONResponse(JSONResponse):
    """JSON with 2-space indentation and literal non-ASCII characters."""

    media_type = JSON_CONTENT_TYPE

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")
