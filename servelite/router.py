from __future__ import annotations

import json
import logging
import os

from pydantic import ValidationError

from servelite.config import ServerSettings
from servelite.errors import RequestParseError
from servelite.files import STATIC_PREFIX, resolve_static_path, send_file
from servelite.pages import ABOUT_PAGE, WELCOME_PAGE
from servelite.response import Connection, send_error, send_inline
from servelite.schemas import Request, StatusReport

logger = logging.getLogger(__name__)


def parse_request_line(raw: bytes) -> Request:
    # Only the first two whitespace-separated tokens matter; the version,
    # headers and body are never looked at. A NUL ends the request text.
    # Tokens are split as bytes and decoded with the filesystem codec so a
    # non-ASCII path opens the file whose name has those exact bytes.
    tokens = raw.split(b"\x00", 1)[0].split(maxsplit=2)
    if len(tokens) < 2:
        raise RequestParseError("request line needs a method and a path")
    try:
        return Request(method=os.fsdecode(tokens[0]), path=os.fsdecode(tokens[1]))
    except ValidationError as e:
        raise RequestParseError(str(e)) from e


def status_body() -> str:
    return json.dumps(StatusReport().model_dump()) + "\n"


def handle_request(conn: Connection, raw: bytes, *, settings: ServerSettings) -> None:
    try:
        request = parse_request_line(raw)
    except RequestParseError as e:
        logger.debug("bad request: %s", e)
        send_error(conn, 400, "Bad Request")
        return

    logger.info("Request: %s %s", request.method, request.path)

    if request.method != "GET":
        send_error(conn, 501, "Not Implemented")
        return

    path = request.path
    if path == "/":
        send_inline(conn, content_type="text/html", body=WELCOME_PAGE)
    elif path == "/about":
        send_inline(conn, content_type="text/html", body=ABOUT_PAGE)
    elif path == "/api/status":
        send_inline(conn, content_type="application/json", body=status_body())
    elif path.startswith(STATIC_PREFIX):
        filepath = resolve_static_path(
            path, root=settings.static_dir, confine=settings.confine_static
        )
        if filepath is None:
            send_error(conn, 404, "Not Found")
            return
        send_file(conn, filepath, chunk_size=settings.chunk_size)
    else:
        send_error(conn, 404, "Not Found")
