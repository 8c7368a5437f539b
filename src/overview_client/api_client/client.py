"""
Overview API client implementation.
"""

import base64
import logging
from typing import TYPE_CHECKING, Any, Optional

from .context import AddressingContext, DocumentContext, StoreContext, Unset
from .errors import ConfigurationError, PreconditionError
from .executor import Executor, RequestDescriptor, RequestsExecutor

if TYPE_CHECKING:
    from ..config import OverviewConfig

logger = logging.getLogger(__name__)


class APIClient:
    """
    Fluent client for the Overview API.

    Selectors (select_document_set, select_document, select_store,
    select_store_object) set what subsequent actions operate on and return
    the client, so calls chain:

        client.select_document_set(5).select_document(9).get()

    Actions build the request and hand it to an executor, returning whatever
    the executor returns. Every action also accepts an explicit ``context``,
    which is used instead of the client's own addressing state.
    """

    API_PREFIX = "/api/v1"
    DEFAULT_FIELDS = ("id", "text")

    def __init__(
        self,
        host: str,
        api_token: str,
        default_executor: Optional[Executor] = None,
    ):
        """
        Initialize Overview client.

        Args:
            host: Scheme and host of the API (e.g., "https://www.overviewdocs.com")
            api_token: API token for authentication
            default_executor: Executor used when an action is not given one
        """
        self._host = host.rstrip("/")
        self._default_executor = default_executor
        self._credential_digest = base64.b64encode(
            f"{api_token}:x-auth-token".encode("utf-8")
        ).decode("ascii")
        self.context: AddressingContext = Unset()

    @classmethod
    def from_config(
        cls,
        config: "OverviewConfig",
        executor: Optional[Executor] = None,
    ) -> "APIClient":
        """Create a client from configuration, defaulting to a RequestsExecutor."""
        if executor is None:
            executor = RequestsExecutor(
                timeout=config.timeout,
                max_retries=config.max_retries,
                backoff_factor=config.backoff_factor,
            )
        return cls(config.host, config.api_token, executor)

    @property
    def host(self) -> str:
        return self._host

    @property
    def credential_digest(self) -> str:
        return self._credential_digest

    @property
    def default_executor(self) -> Optional[Executor]:
        return self._default_executor

    @property
    def mode(self) -> Optional[str]:
        """Current addressing mode: None, "document" or "store"."""
        return self.context.mode

    @property
    def document_set_id(self):
        return getattr(self.context, "document_set_id", None)

    @property
    def document_id(self):
        return getattr(self.context, "document_id", None)

    @property
    def store_object_id(self):
        return getattr(self.context, "store_object_id", None)

    # Selectors

    def select_document_set(self, document_set_id) -> "APIClient":
        """Switch to document mode on the given document set."""
        self.context = self.context.document_set(document_set_id)
        return self

    def select_document(self, document_id) -> "APIClient":
        """
        Narrow document mode to one document.

        Raises:
            PreconditionError: If no document set has been selected
        """
        self.context = self.context.document(document_id)
        return self

    def select_store(self) -> "APIClient":
        """Switch to store mode."""
        self.context = self.context.store()
        return self

    def select_store_object(self, store_object_id) -> "APIClient":
        """Switch to store mode on the given store object."""
        self.context = self.context.store_object(store_object_id)
        return self

    # Document actions

    def get_document_ids(
        self,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """Request the ids of the documents in the selected document set."""
        ctx = self._document_set_context(context)
        return self._request(
            f"/document-sets/{ctx.document_set_id}/documents?fields=id",
            executor,
        )

    def get_documents(
        self,
        fields: Optional[list[str]] = None,
        sort: Optional[str] = None,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """
        Request all documents in the selected document set as a stream.

        Args:
            fields: Fields to return for each document (default: id, text)
            sort: Sort string to apply to the documents
            executor: Executor to use instead of the default one
            context: Addressing context to use instead of the client's own

        Returns:
            The executor's result
        """
        ctx = self._document_set_context(context)

        fields_param = "&fields=" + ",".join(
            fields if fields is not None else self.DEFAULT_FIELDS
        )
        sort_param = f"&sort={sort}" if sort else ""
        path = (
            f"/document-sets/{ctx.document_set_id}/documents?stream=true"
            f"{fields_param}{sort_param}"
        )
        return self._request(path, executor)

    def get(
        self,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """
        Request the selected document, document set or store object.

        Raises:
            PreconditionError: If nothing is selected, or only the store is
                selected (the state and the object list are both candidates)
        """
        ctx = self._resolve_context(context)

        if isinstance(ctx, DocumentContext):
            if ctx.document_id is not None:
                return self._request(
                    f"/document-sets/{ctx.document_set_id}/documents/{ctx.document_id}",
                    executor,
                )
            # No document picked: all documents with default fields and sort
            return self.get_documents(executor=executor, context=ctx)

        if isinstance(ctx, StoreContext):
            if ctx.store_object_id is not None:
                return self._request(f"/store/objects/{ctx.store_object_id}", executor)
            raise PreconditionError("You must specify a store object to return first.")

        raise PreconditionError(
            "You must specify a document set, document, or store object first."
        )

    # Store actions

    def get_state(
        self,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """Request the store's state."""
        self._store_context(context, "You must be operating on the store to get its state.")
        return self._request("/store/state", executor)

    def set_state(
        self,
        state: Any,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """Replace the store's state."""
        self._store_context(context, "You must be operating on the store to set its state.")
        return self._request("/store/state", executor, "PUT", state)

    def get_objects(
        self,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """Request all of the store's objects."""
        self._store_context(context, "You must be operating on the store to get its objects.")
        return self._request("/store/objects", executor)

    def create_object(
        self,
        state: Any,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """
        Create an object in the store.

        Unlike the other store actions this does not require store mode;
        ``context`` is accepted for signature symmetry only.
        """
        return self._request("/store/objects", executor, "POST", state)

    def update_store_object(
        self,
        state: Any,
        executor: Optional[Executor] = None,
        context: Optional[AddressingContext] = None,
    ) -> Any:
        """Replace the selected store object."""
        ctx = self._resolve_context(context)
        store_object_id = getattr(ctx, "store_object_id", None)
        if store_object_id is None:
            raise PreconditionError(
                "You must specify a store object id before calling this method."
            )
        return self._request(f"/store/objects/{store_object_id}", executor, "PUT", state)

    # Internals

    def _resolve_context(self, context: Optional[AddressingContext]) -> AddressingContext:
        return self.context if context is None else context

    def _document_set_context(self, context: Optional[AddressingContext]) -> DocumentContext:
        ctx = self._resolve_context(context)
        if not isinstance(ctx, DocumentContext) or ctx.document_set_id is None:
            raise PreconditionError(
                "You must select a document set before using this method."
            )
        return ctx

    def _store_context(self, context: Optional[AddressingContext], message: str) -> StoreContext:
        ctx = self._resolve_context(context)
        if not isinstance(ctx, StoreContext):
            raise PreconditionError(message)
        return ctx

    def _request(
        self,
        path: str,
        executor: Optional[Executor] = None,
        method: str = "GET",
        body: Optional[Any] = None,
    ) -> Any:
        """Build the request descriptor and hand it to the executor."""
        if executor is None:
            executor = self._default_executor

        if executor is None or not callable(executor):
            raise ConfigurationError(
                "You must provide an executor when constructing the client "
                "or making the request."
            )

        headers = {"Authorization": f"Basic {self._credential_digest}"}
        # Empty containers still count as a body; falsy scalars do not
        if isinstance(body, (dict, list)) or body:
            headers["Content-Type"] = "application/json"

        request = RequestDescriptor(
            url=f"{self._host}{self.API_PREFIX}{path}",
            method=method,
            headers=headers,
            body=body,
        )
        logger.debug(f"{request.method} {request.url}")

        return executor(request)
