"""
Overview API Client.

Provides:
- Fluent selection of document sets, documents, the store and store objects
- Document id and streamed document queries
- Store state and store object reads and writes
- Pluggable executors (requests-based executor with retry/backoff included)

Supports Basic auth with an Overview API token.
"""

from .client import APIClient
from .context import AddressingContext, DocumentContext, StoreContext, Unset
from .errors import (
    APIClientError,
    ConfigurationError,
    OverviewAPIError,
    OverviewConnectionError,
    OverviewError,
    PreconditionError,
)
from .executor import Executor, RequestDescriptor, RequestsExecutor

__all__ = [
    "APIClient",
    "AddressingContext",
    "DocumentContext",
    "StoreContext",
    "Unset",
    "APIClientError",
    "ConfigurationError",
    "PreconditionError",
    "OverviewError",
    "OverviewAPIError",
    "OverviewConnectionError",
    "Executor",
    "RequestDescriptor",
    "RequestsExecutor",
]
