"""Tests for the NetSapiens API gateway (HTTP shape and result normalization)."""

import logging

import pytest
import requests
from fakes import API_PREFIX, API_URL, FakeNetSapiens, make_api

from netsapiens.api import NetSapiensAPI
from netsapiens.config import GatewayConfig, RateLimit


class TestRequestShape:
    def test_sends_auth_and_json_headers(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_domains()

        headers = remote.last.headers
        assert headers["Authorization"] == "Bearer test-token"
        assert headers["Content-Type"] == "application/json"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == "OITVOIP-MCP-Server/1.0.0"

    def test_uses_configured_timeout(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_domains()

        assert remote.timeouts == [5.0]

    def test_base_url_strips_trailing_slash(self, remote: FakeNetSapiens) -> None:
        config = GatewayConfig(api_url="https://api.example.com/", api_token="t")
        make_api(config, remote).get_domains()

        assert remote.last.url == "https://api.example.com/ns-api/v2/domains"

    def test_path_segments_are_percent_encoded(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_user("a/b c", "example.com")

        assert remote.path() == f"{API_PREFIX}/domains/example.com/users/a%2Fb%20c"


class TestSearchUsers:
    def test_domain_scoped_search(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.search_users("john", domain="example.com")

        assert remote.path() == f"{API_PREFIX}/domains/example.com/users"
        assert remote.query() == {"user": "john", "limit": "20"}

    def test_cross_domain_search_without_domain(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.search_users("john", limit=5)

        assert remote.path() == f"{API_PREFIX}/domains/~/users/~"
        assert remote.query() == {"user": "john", "limit": "5"}


class TestCdrRecords:
    def test_user_and_domain_use_user_endpoint(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_cdr_records(start_date="2024-01-01", end_date="2024-01-31", user="alice", domain="example.com")

        assert remote.path() == f"{API_PREFIX}/domains/example.com/users/alice/cdrs"
        assert remote.query() == {"start_time": "2024-01-01", "end_time": "2024-01-31", "limit": "100"}

    def test_domain_only(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_cdr_records(domain="example.com", limit=10)

        assert remote.path() == f"{API_PREFIX}/domains/example.com/cdrs"
        assert remote.query() == {"limit": "10"}

    def test_falls_back_to_global_listing(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_cdr_records(user="alice")

        assert remote.path() == f"{API_PREFIX}/cdrs"
        assert remote.query() == {"limit": "100"}

    def test_explicit_zero_limit_is_sent(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_cdr_records(domain="example.com", limit=0)

        assert remote.query() == {"limit": "0"}


class TestOptionalParameters:
    def test_phone_numbers_without_limit_sends_no_query(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_phone_numbers("example.com")

        assert remote.query() == {}

    def test_phone_numbers_with_limit(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_phone_numbers("example.com", limit=5)

        assert remote.query() == {"limit": "5"}

    def test_agent_statistics_for_one_agent(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        api.get_agent_statistics("example.com", agent_id="1001")

        assert remote.path() == f"{API_PREFIX}/domains/example.com/statistics/agent/1001"


class TestResultNormalization:
    def test_list_operation_keeps_array(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(200, [{"domain": "a"}, {"domain": "b"}])

        res = api.get_domains()

        assert res.success is True
        assert res.data == [{"domain": "a"}, {"domain": "b"}]
        assert res.error is None

    def test_list_operation_wraps_bare_object(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(200, {"domain": "a"})

        res = api.get_domains()

        assert res.data == [{"domain": "a"}]

    def test_list_operation_with_empty_body(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(200, None)

        assert api.get_call_queues("example.com").data == []

    def test_single_entity_returned_as_is(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(200, {"domain": "example.com", "charges": 12.5})

        res = api.get_billing("example.com")

        assert res.success is True
        assert res.data == {"domain": "example.com", "charges": 12.5}

    def test_non_json_body_returned_as_text(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(202, b"queued")

        res = api.login_agent("example.com", "sales", "1001")

        assert res.success is True
        assert res.data == "queued"
        assert res.message == "Agent logged in successfully"

    def test_logout_message(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(200, {"status": "ok"})

        res = api.logout_agent("example.com", "sales", "1001")

        assert remote.last.method == "POST"
        assert remote.last.body is None
        assert res.message == "Agent logged out successfully"


class TestFailures:
    def test_http_error_becomes_failed_result(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(404, {"message": "not found"})

        res = api.get_user_devices("alice", "example.com")

        assert res.success is False
        assert res.data == []
        assert res.error == "Request failed with status code 404"

    @pytest.mark.parametrize("status", [304, 404, 500])
    def test_error_text_never_contains_url(self, api: NetSapiensAPI, remote: FakeNetSapiens, status: int) -> None:
        remote.respond(status, None)

        res = api.get_user("alice", "example.com")

        assert res.success is False
        assert res.error == f"Request failed with status code {status}"
        assert API_URL not in res.error
        assert API_PREFIX not in res.error

    def test_connection_error_text_never_contains_url(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(
            exc=requests.ConnectionError(
                "HTTPSConnectionPool(host='api.example.com', port=443): "
                "Max retries exceeded with url: /ns-api/v2/domains/example.com/users/alice"
            )
        )

        res = api.get_user("alice", "example.com")

        assert res.error == "Could not connect to the NetSapiens API"
        assert "/ns-api/v2" not in res.error

    def test_single_entity_failure_has_no_data(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(500, {"message": "boom"})

        res = api.get_user("alice", "example.com")

        assert res.success is False
        assert res.data is None
        assert res.error

    def test_connection_error(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(exc=requests.ConnectionError("connection refused"))

        res = api.get_agents("example.com")

        assert res.success is False
        assert res.error == "Could not connect to the NetSapiens API"
        assert res.data == []

    def test_timeout(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(exc=requests.Timeout("read timed out"))

        res = api.get_domain("example.com")

        assert res.success is False
        assert res.error == "Request timed out after 5.0 seconds"

    def test_other_request_errors_use_operation_fallback(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(exc=requests.TooManyRedirects("Exceeded 30 redirects."))

        res = api.get_user_devices("alice", "example.com")

        assert res.error == "Failed to get user devices"
        assert res.data == []


class TestUnencodableInput:
    LONE_SURROGATE = "\ud800"

    def test_path_segment_returns_failed_result(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        res = api.get_user(self.LONE_SURROGATE, "example.com")

        assert res.success is False
        assert res.data is None
        assert res.error == "Invalid request parameter: surrogates not allowed"
        assert remote.requests == []

    def test_query_value_returns_failed_result(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        res = api.search_users(self.LONE_SURROGATE)

        assert res.success is False
        assert res.data == []
        assert res.error == "Invalid request parameter: surrogates not allowed"
        assert remote.requests == []

    def test_list_path_returns_empty_list(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        res = api.get_user_devices("alice", self.LONE_SURROGATE)

        assert res.success is False
        assert res.data == []

    def test_failure_is_logged_with_diagnostics(
        self,
        api: NetSapiensAPI,
        remote: FakeNetSapiens,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        remote.respond(403, {"message": "forbidden"})

        with caplog.at_level(logging.ERROR, logger="netsapiens.api"):
            res = api.get_billing("example.com")

        assert "forbidden" not in res.error
        record = next(r for r in caplog.records if r.getMessage() == "NetSapiens API Error")
        assert record.status == 403
        assert record.status_text == "Forbidden"
        assert "forbidden" in record.body
        assert record.url.endswith("/domains/example.com/billing")


class TestConnection:
    def test_reachable_even_with_no_domains(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(200, [])

        res = api.test_connection()

        assert res.success is True
        assert res.data is True
        assert res.message == "Connection successful"
        assert remote.query() == {"limit": "1"}

    def test_unreachable(self, api: NetSapiensAPI, remote: FakeNetSapiens) -> None:
        remote.respond(401, {"message": "bad token"})

        res = api.test_connection()

        assert res.success is False
        assert res.data is False
        assert res.error


class TestRateLimit:
    def test_calls_beyond_limit_are_rejected_without_http(self, remote: FakeNetSapiens) -> None:
        config = GatewayConfig(
            api_url="https://api.example.com",
            api_token="t",
            rate_limit=RateLimit(requests=2, per_milliseconds=60000),
        )
        api = make_api(config, remote)

        assert api.get_domains().success
        assert api.get_domains().success
        res = api.get_domains()

        assert res.success is False
        assert res.error == "Rate limit exceeded: 2 requests per 60000 ms"
        assert res.data == []
        assert len(remote.requests) == 2

    def test_zero_disables_limit(self, remote: FakeNetSapiens) -> None:
        config = GatewayConfig(
            api_url="https://api.example.com",
            api_token="t",
            rate_limit=RateLimit(requests=0, per_milliseconds=60000),
        )
        api = make_api(config, remote)

        for _ in range(5):
            assert api.get_domains().success

        assert len(remote.requests) == 5
