from __future__ import annotations
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from netsapiens.config import USER_AGENT, GatewayConfig
from netsapiens.log import get_logger
from netsapiens.rate_limit import RateLimiter
from netsapiens.results import ApiResult

logger = get_logger(__name__)

DEFAULT_SEARCH_LIMIT = 20
DEFAULT_CDR_LIMIT = 100


def _seg(value: Any) -> str:
    return quote(str(value), safe="")


def _decode(r: requests.Response) -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text


class NetSapiensAPI:
    """
    One method per NetSapiens v2 operation.
    Every method returns an ApiResult; transport, HTTP and encoding errors never escape.

    Paths are templates with `{}` placeholders; each placeholder is filled with
    one percent-encoded path segment.
    """

    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.base = config.base_url
        self.headers = {
            "Authorization": f"Bearer {config.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        self.session = session or requests.Session()
        self.session.headers.update(self.headers)
        self.limiter = RateLimiter(config.rate_limit)

    def close(self) -> None:
        self.session.close()

    def _call(
        self,
        method: str,
        template: str,
        *segments: Any,
        params: Optional[Dict[str, Any]] = None,
        many: bool = False,
        failure: str = "Request failed",
        empty: Any = None,
    ) -> ApiResult:
        if many:
            empty = []

        try:
            url = self.base + template.format(*(_seg(s) for s in segments))
        except UnicodeError as e:
            return self._invalid(e, method, template, empty)

        if not self.limiter.try_acquire():
            logger.warning(
                "NetSapiens rate limit reached",
                extra={"method": method, "url": url, "limit": self.limiter.describe()},
            )
            return ApiResult.failed(f"Rate limit exceeded: {self.limiter.describe()}", data=empty)

        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            r = self.session.request(method, url, params=query or None, timeout=self.config.timeout)
            r.raise_for_status()
            if r.status_code >= 300:
                raise requests.HTTPError(f"Unexpected status {r.status_code}", response=r)
        except requests.RequestException as e:
            self._log_failure(e, method, url)
            return ApiResult.failed(self._error_text(e) or failure, data=empty)
        except UnicodeError as e:
            # query values requests cannot encode as UTF-8
            return self._invalid(e, method, template, empty)

        data = _decode(r)
        if many:
            if data is None:
                data = []
            elif not isinstance(data, list):
                data = [data]
        return ApiResult.ok(data)

    def _error_text(self, e: requests.RequestException) -> str:
        """Caller-facing error text. The request URL stays in the log only."""
        if isinstance(e, requests.HTTPError) and e.response is not None:
            return f"Request failed with status code {e.response.status_code}"
        if isinstance(e, requests.Timeout):
            return f"Request timed out after {self.config.timeout} seconds"
        if isinstance(e, requests.ConnectionError):
            return "Could not connect to the NetSapiens API"
        return ""

    def _invalid(self, e: UnicodeError, method: str, template: str, empty: Any) -> ApiResult:
        reason = getattr(e, "reason", None) or "cannot be encoded"
        logger.warning(
            "NetSapiens request not sent",
            extra={"method": method, "path": template, "error": reason},
        )
        return ApiResult.failed(f"Invalid request parameter: {reason}", data=empty)

    def _log_failure(self, e: requests.RequestException, method: str, url: str) -> None:
        resp = e.response
        logger.error(
            "NetSapiens API Error",
            extra={
                "status": resp.status_code if resp is not None else None,
                "status_text": resp.reason if resp is not None else None,
                "body": (resp.text or "")[:2000] if resp is not None else None,
                "url": resp.url if resp is not None and resp.url else url,
                "method": method,
                "error": str(e),
            },
        )

    # ---- users ----

    def search_users(self, query: str, domain: Optional[str] = None, limit: int = DEFAULT_SEARCH_LIMIT) -> ApiResult:
        params = {"user": query, "limit": limit}
        if domain:
            return self._call(
                "GET", "/domains/{}/users", domain, params=params, many=True, failure="Failed to search users"
            )
        return self._call("GET", "/domains/~/users/~", params=params, many=True, failure="Failed to search users")

    def get_user(self, user_id: str, domain: str) -> ApiResult:
        return self._call("GET", "/domains/{}/users/{}", domain, user_id, failure="Failed to get user")

    def get_user_devices(self, user_id: str, domain: str) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/users/{}/devices",
            domain,
            user_id,
            many=True,
            failure="Failed to get user devices",
        )

    # ---- call detail records ----

    def get_cdr_records(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        user: Optional[str] = None,
        domain: Optional[str] = None,
        limit: int = DEFAULT_CDR_LIMIT,
    ) -> ApiResult:
        if user and domain:
            template, segments = "/domains/{}/users/{}/cdrs", (domain, user)
        elif domain:
            template, segments = "/domains/{}/cdrs", (domain,)
        else:
            template, segments = "/cdrs", ()

        params = {"start_time": start_date, "end_time": end_date, "limit": limit}
        return self._call("GET", template, *segments, params=params, many=True, failure="Failed to get CDR records")

    # ---- domains ----

    def get_domains(self) -> ApiResult:
        return self._call("GET", "/domains", many=True, failure="Failed to get domains")

    def get_domain(self, domain: str) -> ApiResult:
        return self._call("GET", "/domains/{}", domain, failure="Failed to get domain")

    # ---- phone numbers ----

    def get_phone_numbers(self, domain: str, limit: Optional[int] = None) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/phonenumbers",
            domain,
            params={"limit": limit},
            many=True,
            failure="Failed to get phone numbers",
        )

    def get_phone_number(self, domain: str, phone_number: str) -> ApiResult:
        return self._call(
            "GET", "/domains/{}/phonenumbers/{}", domain, phone_number, failure="Failed to get phone number"
        )

    # ---- call queues ----

    def get_call_queues(self, domain: str) -> ApiResult:
        return self._call("GET", "/domains/{}/callqueues", domain, many=True, failure="Failed to get call queues")

    def get_call_queue(self, domain: str, queue_id: str) -> ApiResult:
        return self._call("GET", "/domains/{}/callqueues/{}", domain, queue_id, failure="Failed to get call queue")

    def get_call_queue_agents(self, domain: str, queue_id: str) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/callqueues/{}/agents",
            domain,
            queue_id,
            many=True,
            failure="Failed to get call queue agents",
        )

    # ---- agents ----

    def get_agents(self, domain: str) -> ApiResult:
        return self._call("GET", "/domains/{}/agents", domain, many=True, failure="Failed to get agents")

    def _agent_action(self, domain: str, queue_id: str, agent_id: str, action: str, failure: str) -> ApiResult:
        return self._call(
            "POST",
            "/domains/{}/callqueues/{}/agents/{}/" + action,
            domain,
            queue_id,
            agent_id,
            failure=failure,
        )

    def login_agent(self, domain: str, queue_id: str, agent_id: str) -> ApiResult:
        res = self._agent_action(domain, queue_id, agent_id, "login", "Failed to login agent")
        if res.success:
            return ApiResult.ok(res.data, message="Agent logged in successfully")
        return res

    def logout_agent(self, domain: str, queue_id: str, agent_id: str) -> ApiResult:
        res = self._agent_action(domain, queue_id, agent_id, "logout", "Failed to logout agent")
        if res.success:
            return ApiResult.ok(res.data, message="Agent logged out successfully")
        return res

    def get_agent_statistics(self, domain: str, agent_id: Optional[str] = None) -> ApiResult:
        if agent_id:
            return self._call(
                "GET", "/domains/{}/statistics/agent/{}", domain, agent_id, failure="Failed to get agent statistics"
            )
        return self._call("GET", "/domains/{}/statistics/agent", domain, failure="Failed to get agent statistics")

    # ---- auto attendants ----

    def get_auto_attendants(self, domain: str) -> ApiResult:
        return self._call(
            "GET", "/domains/{}/autoattendants", domain, many=True, failure="Failed to get auto attendants"
        )

    # ---- answer rules ----

    def get_user_answer_rules(self, user_id: str, domain: str) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/users/{}/answerrules",
            domain,
            user_id,
            many=True,
            failure="Failed to get answer rules",
        )

    def get_user_answer_rule(self, user_id: str, domain: str, timeframe: str) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/users/{}/answerrules/{}",
            domain,
            user_id,
            timeframe,
            failure="Failed to get answer rule",
        )

    # ---- greetings, voicemail, music on hold ----

    def get_user_greetings(self, user_id: str, domain: str) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/users/{}/greetings",
            domain,
            user_id,
            many=True,
            failure="Failed to get user greetings",
        )

    def get_user_voicemails(self, user_id: str, domain: str) -> ApiResult:
        return self._call(
            "GET",
            "/domains/{}/users/{}/voicemail",
            domain,
            user_id,
            many=True,
            failure="Failed to get user voicemails",
        )

    def get_music_on_hold(self, domain: str) -> ApiResult:
        return self._call("GET", "/domains/{}/moh", domain, many=True, failure="Failed to get music on hold")

    # ---- billing ----

    def get_billing(self, domain: str) -> ApiResult:
        return self._call("GET", "/domains/{}/billing", domain, failure="Failed to get billing information")

    # ---- connectivity ----

    def test_connection(self) -> ApiResult:
        res = self._call("GET", "/domains", params={"limit": 1}, failure="Connection failed", empty=False)
        if res.success:
            return ApiResult.ok(True, message="Connection successful")
        return res
