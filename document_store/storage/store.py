"""
In-memory document store
"""
import contextlib
import logging
import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional
from document_store.core.config import Config, StoreConfig
from document_store.core.exceptions import DuplicateIdentifierError, InvalidIdError
from document_store.core.models import Document, SearchRequest
from document_store.search.coordinator import SearchCoordinator
from document_store.utils.helpers import generate_document_id, is_blank, utc_now
from document_store.utils.logger import setup_logging_from_config


class DocumentStore:
    """
    Owns the mapping from document id to document

    Every stored document has a non-blank unique id and a created timestamp.
    All public operations run under one lock so the duplicate check and the
    insert in ``save`` happen atomically.
    """

    def __init__(
        self,
        config: StoreConfig = None,
        clock: Callable[[], datetime] = None,
        coordinator: SearchCoordinator = None
    ):
        self.config = config or StoreConfig()
        self.clock = clock or utc_now
        self.coordinator = coordinator or SearchCoordinator()
        self.logger = logging.getLogger("DocumentStore")

        self._documents: Dict[str, Document] = {}
        self._lock = threading.RLock() if self.config.thread_safe else contextlib.nullcontext()

    @classmethod
    def from_config(cls, config: Config, clock: Callable[[], datetime] = None) -> "DocumentStore":
        """Create a store from the main configuration, setting up its logging"""
        setup_logging_from_config(config.logging)
        return cls(config.store, clock=clock)

    def save(self, document: Document) -> Document:
        """
        Store a document, assigning its id and created timestamp

        Args:
            document: Document to store; a missing or blank id is generated

        Returns:
            The same document object, finalized

        Raises:
            DuplicateIdentifierError: if the resolved id is already stored
        """
        with self._lock:
            document_id = document.id
            if is_blank(document_id):
                document_id = generate_document_id(self.config.id_length)

            if document_id in self._documents:
                self.logger.warning(f"Rejected duplicate document id: {document_id}")
                raise DuplicateIdentifierError(document_id)

            document.id = document_id
            document.created = self.clock()
            self._documents[document_id] = document

        self.logger.info(f"Saved document: {document_id}")
        return document

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """
        Look up a stored document

        Args:
            document_id: Id to look up

        Returns:
            The stored document, or None if the id is unknown

        Raises:
            InvalidIdError: if document_id is None or blank
        """
        if is_blank(document_id):
            self.logger.warning("Lookup rejected: blank document id")
            raise InvalidIdError()

        with self._lock:
            document = self._documents.get(document_id)

        self.logger.debug(f"Lookup {document_id}: {'found' if document is not None else 'not found'}")
        return document

    def search(self, request: Optional[SearchRequest]) -> List[Document]:
        """
        Find documents satisfying at least one criterion of the request

        Args:
            request: Search criteria; None matches nothing

        Returns:
            Matching documents in storage iteration order
        """
        if request is None:
            request = SearchRequest()

        with self._lock:
            return self.coordinator.search(list(self._documents.values()), request)

    def dump(self) -> List[str]:
        """Log every stored entry at DEBUG level and return the rendered lines"""
        with self._lock:
            lines = [f"{document_id}={document!r}" for document_id, document in self._documents.items()]

        for line in lines:
            self.logger.debug(line)
        return lines

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, document_id: str) -> bool:
        with self._lock:
            return document_id in self._documents
