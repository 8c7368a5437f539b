"""
Exceptions raised by the Overview API client and its executors.

Client errors are raised before any request is sent. Executor errors come
from the transport and are never caught by the client.
"""

from typing import Optional


class APIClientError(Exception):
    """Base exception for errors raised by the client itself."""
    pass


class PreconditionError(APIClientError):
    """Required addressing state is missing for the requested action."""
    pass


class ConfigurationError(APIClientError):
    """No executor is available to send the request."""
    pass


class OverviewError(Exception):
    """Base exception for executor (transport) errors."""
    pass


class OverviewAPIError(OverviewError):
    """API returned an error response."""
    def __init__(self, status_code: int, message: str, response_body: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        super().__init__(f"Overview API error {status_code}: {message}")


class OverviewConnectionError(OverviewError):
    """Failed to connect to the Overview server."""
    pass
