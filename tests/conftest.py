"""
Shared fixtures: a NetSapiensAPI wired to an in-process fake platform.
"""

from __future__ import annotations

import pytest
from fakes import API_URL, FakeNetSapiens, make_api

from mcp_tools import Dispatcher
from netsapiens.api import NetSapiensAPI
from netsapiens.config import GatewayConfig, RateLimit, ServerConfig

ENV_KEYS = (
    "NETSAPIENS_API_TOKEN",
    "NETSAPIENS_API_URL",
    "NETSAPIENS_TIMEOUT_SECONDS",
    "NETSAPIENS_RATE_LIMIT_REQUESTS",
    "NETSAPIENS_RATE_LIMIT_WINDOW_MS",
    "DEBUG",
    "LOG_LEVEL",
    "MCP_TRANSPORT",
    "HOST",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def gateway_config() -> GatewayConfig:
    return GatewayConfig(
        api_url=API_URL,
        api_token="test-token",
        timeout=5.0,
        rate_limit=RateLimit(requests=100, per_milliseconds=60000),
    )


@pytest.fixture
def server_config(gateway_config: GatewayConfig) -> ServerConfig:
    return ServerConfig(netsapiens=gateway_config)


@pytest.fixture
def remote() -> FakeNetSapiens:
    return FakeNetSapiens()


@pytest.fixture
def api(gateway_config: GatewayConfig, remote: FakeNetSapiens) -> NetSapiensAPI:
    return make_api(gateway_config, remote)


@pytest.fixture
def dispatcher(api: NetSapiensAPI) -> Dispatcher:
    return Dispatcher(api)
