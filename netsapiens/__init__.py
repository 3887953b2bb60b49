from .api import NetSapiensAPI
from .config import ConfigError, GatewayConfig, RateLimit, ServerConfig, load_config
from .results import ApiResult

__all__ = [
    "ApiResult",
    "ConfigError",
    "GatewayConfig",
    "NetSapiensAPI",
    "RateLimit",
    "ServerConfig",
    "load_config",
]
