"""
Retrying HTTP client for the verification API.

RequestHandler.make_request() issues one request up to ``retries`` times.
HTTP 500 responses back off exponentially (``backoff_ms * 1.5**attempt``);
every other failure waits a fixed 2 seconds. Failures never escape: the
caller always gets a RequestResult and checks ``result.ok``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import httpx

from .console import ConsoleLogger


DEFAULT_RETRIES = 30
DEFAULT_BACKOFF_MS = 2000
RETRY_DELAY_S = 2.0
REQUEST_TIMEOUT_S = 60.0

# Responses at or above this status are failures.
FAILURE_STATUS = 500
BACKOFF_STATUSES = frozenset({500})

BROWSER_HEADERS: dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Encoding": "gzip, deflate, br",
    "Accept-Language": "en-US,en;q=0.9",
    "Origin": "https://layeredge.io",
    "Referer": "https://layeredge.io/",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-site",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    ),
    "sec-ch-ua": '"Not A(Brand";v="99", "Google Chrome";v="121", "Chromium";v="121"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Windows"',
}


@dataclass(frozen=True)
class RequestSpec:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None
    timeout: float = REQUEST_TIMEOUT_S


class RequestError(Exception):
    """A failed request attempt, with whatever HTTP context was available."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        url: Optional[str] = None,
        method: Optional[str] = None,
        response_data: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason = reason
        self.url = url
        self.method = method
        self.response_data = response_data
        self.headers = headers

    @classmethod
    def from_response(cls, response: httpx.Response, req: RequestSpec) -> "RequestError":
        try:
            data = response.json()
        except ValueError:
            data = response.text
        return cls(
            f"Request failed with status code {response.status_code}",
            status=response.status_code,
            reason=response.reason_phrase,
            url=req.url,
            method=req.method,
            response_data=data,
            headers=req.headers,
        )

    @classmethod
    def from_exception(cls, exc: Exception, req: RequestSpec) -> "RequestError":
        return cls(
            f"{type(exc).__name__}: {exc}",
            url=req.url,
            method=req.method,
            headers=req.headers,
        )


@dataclass(frozen=True)
class RequestResult:
    """Outcome of make_request: a response, or the last error seen."""

    response: Optional[httpx.Response] = None
    error: Optional[RequestError] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.response is not None

    @property
    def data(self) -> Any:
        """Decoded JSON body (falls back to text); None without a response."""
        if self.response is None:
            return None
        try:
            return self.response.json()
        except ValueError:
            return self.response.text

    @property
    def has_data(self) -> bool:
        """True when a response body is present (an empty JSON object counts)."""
        data = self.data
        return data is not None and data != ""


class RequestHandler:
    """
    Retrying wrapper around an httpx.Client.

    Args:
        logger: Console logger for per-attempt diagnostics.
        client: httpx.Client to send with (default: a new one, owned here).
        sleep: Blocking sleep in seconds; injectable for tests.
        backoff_statuses: Statuses that use the exponential schedule.
    """

    def __init__(
        self,
        logger: ConsoleLogger,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
        backoff_statuses: frozenset[int] = BACKOFF_STATUSES,
    ) -> None:
        self.logger = logger
        self._owns_client = client is None
        self.client = client or httpx.Client()
        self.sleep = sleep
        self.backoff_statuses = backoff_statuses

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "RequestHandler":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def send(self, req: RequestSpec) -> httpx.Response:
        """Send one attempt. Raises RequestError on any failure."""
        try:
            response = self.client.request(
                req.method.upper(),
                req.url,
                headers=req.headers,
                json=req.json,
                timeout=req.timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError) as exc:
            # Bad URLs and unserializable bodies fail while building the request.
            raise RequestError.from_exception(exc, req) from exc

        if response.status_code >= FAILURE_STATUS:
            raise RequestError.from_response(response, req)
        return response

    def make_request(
        self,
        req: RequestSpec,
        retries: int = DEFAULT_RETRIES,
        backoff_ms: float = DEFAULT_BACKOFF_MS,
    ) -> RequestResult:
        """
        Send ``req`` until it succeeds or ``retries`` attempts are used.

        Returns:
            RequestResult with the first successful response, or with the
            last RequestError once every attempt has failed.
        """
        if retries < 1:
            raise ValueError("retries must be at least 1")

        last_error: Optional[RequestError] = None
        for attempt in range(retries):
            is_last = attempt == retries - 1
            self.logger.verbose(f"Attempting request ({attempt + 1}/{retries})", f"URL: {req.url}")
            try:
                response = self.send(req)
            except RequestError as exc:
                last_error = exc
            else:
                self.logger.verbose("Request successful", f"Status: {response.status_code}")
                return RequestResult(response=response, attempts=attempt + 1)

            if last_error.status in self.backoff_statuses:
                self.logger.error(
                    f"Server Error ({last_error.status})",
                    f"Attempt {attempt + 1}/{retries}",
                    last_error,
                )
                if is_last:
                    break
                wait_ms = backoff_ms * 1.5 ** attempt
                self.logger.warn(f"Waiting {wait_ms / 1000:g}s before retry...")
                self.sleep(wait_ms / 1000)
                continue

            if is_last:
                self.logger.error("Max retries reached", "", last_error)
                break

            self.logger.warn("Request failed", f"Attempt {attempt + 1}/{retries}")
            self.sleep(RETRY_DELAY_S)

        return RequestResult(error=last_error, attempts=retries)


def make_request(
    handler: RequestHandler,
    method: str,
    url: str,
    json: Any = None,
    headers: Optional[dict[str, str]] = None,
    retries: int = DEFAULT_RETRIES,
) -> RequestResult:
    """Send a request with the browser header set; caller headers win."""
    req = RequestSpec(
        method=method,
        url=url,
        headers={**BROWSER_HEADERS, **(headers or {})},
        json=json,
        timeout=REQUEST_TIMEOUT_S,
    )
    return handler.make_request(req, retries=retries)
