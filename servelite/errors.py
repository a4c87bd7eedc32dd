from __future__ import annotations


class ServeliteError(Exception):
    """Base class for errors raised by servelite."""


class RequestParseError(ServeliteError, ValueError):
    """The request line did not contain a method and a path."""


class ServerStartupError(ServeliteError):
    """Creating, binding or listening on the server socket failed."""

    def __init__(self, step: str, cause: OSError) -> None:
        super().__init__(f"{step} failed: {cause}")
        self.step = step
        self.cause = cause
