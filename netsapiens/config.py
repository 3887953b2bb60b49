from __future__ import annotations
import os
from dataclasses import dataclass, field

SERVICE_NAME = "oitvoip-mcp-server"
VERSION = "1.0.0"
USER_AGENT = f"OITVOIP-MCP-Server/{VERSION}"

DEFAULT_API_URL = "https://api.ucaasnetwork.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
# 100 requests per minute
DEFAULT_RATE_LIMIT_REQUESTS = 100
DEFAULT_RATE_LIMIT_WINDOW_MS = 60000

TRANSPORTS = ("stdio", "sse")


class ConfigError(Exception):
    pass


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_number(key: str, default, cast):
    raw = env(key)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}")


def _env_flag(key: str) -> bool:
    return (env(key, "") or "").lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RateLimit:
    requests: int = DEFAULT_RATE_LIMIT_REQUESTS
    per_milliseconds: int = DEFAULT_RATE_LIMIT_WINDOW_MS

    @property
    def enabled(self) -> bool:
        return self.requests > 0 and self.per_milliseconds > 0


@dataclass(frozen=True)
class GatewayConfig:
    api_url: str
    api_token: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    rate_limit: RateLimit = field(default_factory=RateLimit)

    @property
    def base_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/ns-api/v2"


@dataclass(frozen=True)
class ServerConfig:
    netsapiens: GatewayConfig
    name: str = SERVICE_NAME
    version: str = VERSION
    debug: bool = False
    log_level: str = "INFO"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


def load_gateway_config() -> GatewayConfig:
    token = env("NETSAPIENS_API_TOKEN")
    if not token:
        raise ConfigError("NETSAPIENS_API_TOKEN environment variable is required")

    return GatewayConfig(
        api_url=(env("NETSAPIENS_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL).rstrip("/"),
        api_token=token,
        timeout=_env_number("NETSAPIENS_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, float),
        rate_limit=RateLimit(
            requests=_env_number("NETSAPIENS_RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS, int),
            per_milliseconds=_env_number("NETSAPIENS_RATE_LIMIT_WINDOW_MS", DEFAULT_RATE_LIMIT_WINDOW_MS, int),
        ),
    )


def load_config() -> ServerConfig:
    """
    Read the whole process configuration from the environment.
    Raises ConfigError when the API token is missing or a number is malformed.
    """
    debug = _env_flag("DEBUG")
    transport = (env("MCP_TRANSPORT", "stdio") or "stdio").lower()
    if transport not in TRANSPORTS:
        raise ConfigError(f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}")

    return ServerConfig(
        netsapiens=load_gateway_config(),
        debug=debug,
        log_level=(env("LOG_LEVEL", "DEBUG" if debug else "INFO") or "INFO").upper(),
        transport=transport,
        host=env("HOST", "127.0.0.1") or "127.0.0.1",
        port=_env_number("PORT", 8000, int),
    )
