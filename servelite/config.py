from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_BACKLOG = 10
# Upper bound on a single request read; anything past it is never seen.
BUFFER_SIZE = 4096
STATIC_DIR = "static"

_FALSY = {"0", "false", "no", "off"}


def load_env() -> None:
    # Search upwards from the working directory, the same place static files
    # are served from.
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)


@dataclass(frozen=True)
class ServerSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    backlog: int = DEFAULT_BACKLOG
    read_size: int = BUFFER_SIZE
    chunk_size: int = BUFFER_SIZE
    static_dir: Path = Path(STATIC_DIR)
    confine_static: bool = True
    log_level: str = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSY


def load_settings() -> ServerSettings:
    load_env()
    port = _env_int("SERVELITE_PORT", DEFAULT_PORT)
    if not 0 <= port <= 65535:
        raise ValueError(f"SERVELITE_PORT out of range: {port}")
    log_level = (os.getenv("SERVELITE_LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"SERVELITE_LOG_LEVEL is not a logging level: {log_level!r}")
    return ServerSettings(
        host=(os.getenv("SERVELITE_HOST") or DEFAULT_HOST).strip(),
        port=port,
        static_dir=Path(os.getenv("SERVELITE_STATIC_DIR") or STATIC_DIR),
        confine_static=_env_bool("SERVELITE_CONFINE_STATIC", True),
        log_level=log_level,
    )
