"""Sequential TCP listener: one connection, one request, one response."""

from __future__ import annotations

import logging
import socket

from servelite.config import ServerSettings
from servelite.errors import ServerStartupError
from servelite.response import Connection
from servelite.router import handle_request

logger = logging.getLogger(__name__)


def handle_client(conn: Connection, *, settings: ServerSettings) -> None:
    """Read a single request from conn, answer it, and close conn."""
    try:
        try:
            raw = conn.recv(settings.read_size)
        except OSError as e:
            logger.error("read failed: %s", e)
            return
        if not raw:
            logger.warning("read failed: connection closed before a request arrived")
            return
        handle_request(conn, raw, settings=settings)
    finally:
        conn.close()


class Server:
    """Owns the listening socket.

    Connections are handled strictly one after another; a concurrent
    variant would replace ``serve_once`` with a hand-off to a worker.
    """

    def __init__(self, settings: ServerSettings | None = None) -> None:
        self.settings = settings or ServerSettings()
        self._sock: socket.socket | None = None

    def __enter__(self) -> Server:
        self.bind()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @property
    def address(self) -> tuple[str, int]:
        if self._sock is None:
            raise RuntimeError("server is not bound")
        host, port = self._sock.getsockname()[:2]
        return host, port

    def bind(self) -> tuple[str, int]:
        if self._sock is not None:
            return self.address
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as e:
            raise ServerStartupError("socket", e) from e

        step = "setsockopt"
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            step = "bind"
            sock.bind((self.settings.host, self.settings.port))
            step = "listen"
            sock.listen(self.settings.backlog)
        except OSError as e:
            sock.close()
            raise ServerStartupError(step, e) from e

        self._sock = sock
        return self.address

    def serve_once(self) -> None:
        if self._sock is None:
            raise RuntimeError("server is not bound")
        try:
            conn, addr = self._sock.accept()
        except OSError as e:
            if self._sock is not None:
                logger.error("accept failed: %s", e)
            return
        logger.info("New connection from %s:%d", addr[0], addr[1])
        handle_client(conn, settings=self.settings)

    def serve(self) -> None:
        """Accept and handle connections until close() or an interrupt."""
        self.bind()
        while self._sock is not None:
            self.serve_once()

    def close(self) -> None:
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()


def run_server(settings: ServerSettings) -> None:
    server = Server(settings)
    server.bind()

    port = server.address[1]
    print(f"HTTP Server running on port {port}")
    print(f"Visit http://localhost:{port}")
    print("Press Ctrl+C to stop the server\n")

    try:
        server.serve()
    except KeyboardInterrupt:
        print("\nShutting down server...")
    finally:
        server.close()
