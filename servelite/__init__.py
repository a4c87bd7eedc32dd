from __future__ import annotations

from servelite.config import ServerSettings, load_settings
from servelite.errors import RequestParseError, ServeliteError, ServerStartupError
from servelite.files import resolve_static_path, send_file
from servelite.mime import MIME_TYPES, resolve_mime
from servelite.response import Connection, send_error
from servelite.router import handle_request, parse_request_line
from servelite.schemas import Request, StatusReport
from servelite.server import Server, handle_client, run_server

__all__ = [
    "__version__",
    # Config
    "ServerSettings",
    "load_settings",
    # Errors
    "ServeliteError",
    "RequestParseError",
    "ServerStartupError",
    # Responses
    "Connection",
    "MIME_TYPES",
    "resolve_mime",
    "send_error",
    "send_file",
    "resolve_static_path",
    # Routing
    "Request",
    "StatusReport",
    "parse_request_line",
    "handle_request",
    # Server
    "Server",
    "handle_client",
    "run_server",
]

__version__ = "0.1.0"
