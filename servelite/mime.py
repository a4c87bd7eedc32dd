from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_MIME_TYPE = "text/plain"

MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        ".html": "text/html",
        ".css": "text/css",
        ".js": "application/javascript",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".json": "application/json",
    }
)


def resolve_mime(path: str) -> str:
    # Case-sensitive, and only the text after the last dot in the whole path
    # counts: "a.tar.gz" is ".gz", "static.d/README" is ".d/README".
    dot = path.rfind(".")
    if dot < 0:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES.get(path[dot:], DEFAULT_MIME_TYPE)
