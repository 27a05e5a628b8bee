"""
Document Store

An in-memory document store with generated identifiers and OR-combined
multi-criterion search.
"""

__version__ = "0.1.0"

from .core.config import Config, StoreConfig
from .core.exceptions import (
    DocumentStoreError, InvalidIdError, DuplicateIdentifierError, MissingTimestampError
)
from .core.models import Author, Document, SearchRequest
from .search.coordinator import SearchCoordinator
from .storage.store import DocumentStore

__all__ = [
    "Author",
    "Config",
    "Document",
    "DocumentStore",
    "DocumentStoreError",
    "DuplicateIdentifierError",
    "InvalidIdError",
    "MissingTimestampError",
    "SearchCoordinator",
    "SearchRequest",
    "StoreConfig",
]
