from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

HTTP_VERSION = "HTTP/1.1"


@runtime_checkable
class Connection(Protocol):
    """The slice of a connected socket that request handling needs."""

    def recv(self, bufsize: int, /) -> bytes: ...

    def sendall(self, data: bytes, /) -> None: ...

    def close(self) -> None: ...


def render_head(*, status: int, reason: str, headers: dict[str, str]) -> bytes:
    lines = [f"{HTTP_VERSION} {status} {reason}"]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    return ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1")


def send_bytes(conn: Connection, data: bytes) -> bool:
    """Write data to the client; False if the peer went away."""
    try:
        conn.sendall(data)
    except OSError as e:
        logger.debug("send failed: %s", e)
        return False
    return True


def error_body(*, status: int, reason: str) -> str:
    return f"<html><body><h1>{status} {reason}</h1><p>{reason}</p></body></html>\n"


def send_error(conn: Connection, status: int, reason: str) -> None:
    # No Content-Length: the close after this write is what frames the body.
    head = render_head(
        status=status,
        reason=reason,
        headers={"Content-Type": "text/html", "Connection": "close"},
    )
    send_bytes(conn, head + error_body(status=status, reason=reason).encode("utf-8"))


def send_inline(conn: Connection, *, content_type: str, body: str) -> None:
    head = render_head(
        status=200,
        reason="OK",
        headers={"Content-Type": content_type, "Connection": "close"},
    )
    send_bytes(conn, head + body.encode("utf-8"))
