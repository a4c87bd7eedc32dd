from __future__ import annotations

import logging
import os
from pathlib import Path

from servelite.config import BUFFER_SIZE
from servelite.mime import resolve_mime
from servelite.response import Connection, render_head, send_bytes, send_error

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/static/"


def resolve_static_path(path: str, *, root: Path, confine: bool = True) -> str | None:
    """Map a ``/static/...`` request path onto the static root.

    Without ``confine`` the remainder of the path is appended as-is, ``..``
    segments included. With it the canonical form of that path must stay
    inside the root, otherwise ``None`` is returned; the path handed back is
    still the request-derived one, so symlinks keep the requested name.
    """
    if not path.startswith(STATIC_PREFIX):
        raise ValueError(f"not a static path: {path}")
    rest = path[len(STATIC_PREFIX) :]
    if not confine:
        return f"{root}/{rest}"

    if "\x00" in rest:
        return None
    requested = os.path.join(root, rest.lstrip("/"))
    root_real = os.path.realpath(root)
    if os.path.commonpath([os.path.realpath(requested), root_real]) != root_real:
        logger.warning("refusing static path outside %s: %s", root_real, path)
        return None
    return requested


def send_file(conn: Connection, filepath: str | Path, *, chunk_size: int = BUFFER_SIZE) -> None:
    try:
        f = open(filepath, "rb")
    except (OSError, ValueError) as e:
        # Missing, unreadable and directories all look the same to the client.
        logger.debug("cannot open %s: %s", filepath, e)
        send_error(conn, 404, "Not Found")
        return

    with f:
        size = f.seek(0, os.SEEK_END)
        f.seek(0, os.SEEK_SET)
        head = render_head(
            status=200,
            reason="OK",
            headers={
                "Content-Type": resolve_mime(str(filepath)),
                "Content-Length": str(size),
                "Connection": "close",
            },
        )
        if not send_bytes(conn, head):
            return
        while True:
            try:
                chunk = f.read(chunk_size)
            except OSError as e:
                logger.debug("read failed for %s: %s", filepath, e)
                break
            if not chunk:
                break
            if not send_bytes(conn, chunk):
                break
