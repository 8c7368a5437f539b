"""
Addressing contexts for the Overview API client.

A context names what subsequent actions operate on. Contexts are frozen
values; every selector returns a new context instead of changing the
current one:

- Unset: nothing selected yet
- DocumentContext: a document set, optionally narrowed to one document
- StoreContext: the plugin store, optionally narrowed to one store object
"""

from dataclasses import dataclass
from typing import Optional, Union

from .errors import PreconditionError

MODE_DOCUMENT = "document"
MODE_STORE = "store"


class _Selectors:
    """Fluent selectors shared by all context variants."""

    def document_set(self, document_set_id) -> "DocumentContext":
        """Address a document set, dropping any selected document."""
        return DocumentContext(document_set_id=document_set_id)

    def document(self, document_id) -> "DocumentContext":
        raise PreconditionError(
            "You must specify a document set before a document."
        )

    def store(self) -> "StoreContext":
        """Address the store as a whole, dropping any selected object."""
        return StoreContext()

    def store_object(self, store_object_id) -> "StoreContext":
        return StoreContext(store_object_id=store_object_id)


@dataclass(frozen=True)
class Unset(_Selectors):
    """No document set, document or store selected."""

    mode = None


@dataclass(frozen=True)
class DocumentContext(_Selectors):
    """Document mode: a document set and, optionally, one of its documents."""

    document_set_id: object
    document_id: Optional[object] = None

    mode = MODE_DOCUMENT

    def document(self, document_id) -> "DocumentContext":
        if self.document_set_id is None:
            return super().document(document_id)
        return DocumentContext(
            document_set_id=self.document_set_id,
            document_id=document_id,
        )


@dataclass(frozen=True)
class StoreContext(_Selectors):
    """Store mode: the store state, or one store object when an id is set."""

    store_object_id: Optional[object] = None

    mode = MODE_STORE


AddressingContext = Union[Unset, DocumentContext, StoreContext]
