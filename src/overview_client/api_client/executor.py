"""
Request executors.

An executor receives a fully built RequestDescriptor and performs the
transport. Any callable with that signature works; RequestsExecutor is the
one shipped with the library.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol
from urllib.parse import parse_qs, urlsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import OverviewAPIError, OverviewConnectionError, OverviewError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything an executor needs to send one request."""
    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None


class Executor(Protocol):
    """Callable that sends a request and returns an implementation-defined result."""

    def __call__(self, request: RequestDescriptor) -> Any:
        ...


def is_stream_request(url: str) -> bool:
    """Check whether the URL asks the server for a streamed response."""
    query = parse_qs(urlsplit(url).query)
    return "true" in query.get("stream", [])


class RequestsExecutor:
    """
    Executor backed by a requests Session.

    Features:
    - JSON request bodies and decoded JSON results
    - Raw streaming responses for stream=true requests
    - Automatic retry with backoff for transient failures
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the executor.

        Args:
            timeout: Request timeout in seconds
            max_retries: Maximum retry attempts for transient failures
            backoff_factor: Backoff factor for retries
            session: Pre-configured session to use instead of a new one
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "PUT"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def __call__(self, request: RequestDescriptor) -> Any:
        """
        Send the request.

        Returns:
            The open requests.Response for streamed requests, otherwise the
            decoded JSON body (None when the response has no body).
        """
        stream = is_stream_request(request.url)

        try:
            response = self.session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                json=request.body,
                timeout=self.timeout,
                stream=stream,
            )
        except requests.exceptions.ConnectionError as e:
            raise OverviewConnectionError(f"Failed to connect to {request.url}: {e}")
        except requests.exceptions.Timeout as e:
            raise OverviewConnectionError(f"Request to {request.url} timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise OverviewError(f"Request failed: {e}")

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if not response.ok:
            error_body = response.text
            response.close()
            raise OverviewAPIError(
                status_code=response.status_code,
                message=response.reason,
                response_body=error_body,
            )

        if stream:
            return response

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise OverviewError(f"Invalid JSON in response from {request.url}: {e}")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
