"""Server configuration with CLI > env var > defaults precedence."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000
DEFAULT_LOG_LEVEL = "INFO"


def _env(name: str, default: str = "") -> str:
    """Read an env var, treating empty or blank values as unset."""
    raw = os.getenv(name, "").strip()
    return raw or default


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if not raw:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def _parse_port(raw: str, source: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"{source} must be an integer port, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"{source} must be between 1 and 65535, got {port}")
    return port


@dataclass
class ServerConfig:
    """Configuration for the GraphQL server process."""
    host: str = ""
    port: int = 0
    graphiql: Optional[bool] = None
    graphql_path: str = "/query"
    log_dir: str = ""
    log_level: str = ""

    def __post_init__(self):
        # Apply env var defaults before CLI overrides
        if not self.host:
            self.host = _env("VAULTQL_HOST", DEFAULT_HOST)
        if not self.port:
            env_port = _env("VAULTQL_PORT")
            self.port = _parse_port(env_port, "VAULTQL_PORT") if env_port else DEFAULT_PORT
        else:
            self.port = _parse_port(str(self.port), "port")
        if self.graphiql is None:
            self.graphiql = _env_flag("VAULTQL_GRAPHIQL", True)
        if not self.log_dir:
            self.log_dir = _env("VAULTQL_LOG_DIR")
        if not self.log_level:
            self.log_level = _env("VAULTQL_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        self.log_level = self.log_level.upper()

    @property
    def address(self) -> str:
        """Where the server can be reached."""
        host = "localhost" if self.host == DEFAULT_HOST else self.host
        return f"{host}:{self.port}"
