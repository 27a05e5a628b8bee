"""
Errors raised by the document store
"""
from typing import Optional


class DocumentStoreError(Exception):
    """Base class for document store errors"""


class InvalidIdError(DocumentStoreError, ValueError):
    """Raised when a document id is required but missing or blank"""

    def __init__(self, message: str = "Please specify document id"):
        super().__init__(message)


class DuplicateIdentifierError(DocumentStoreError, ValueError):
    """Raised on save when the resolved id is already stored"""

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Id: {document_id} already exists")


class MissingTimestampError(DocumentStoreError, ValueError):
    """Raised when a date criterion is evaluated against a document without a created timestamp"""

    def __init__(self, document_id: Optional[str] = None):
        self.document_id = document_id
        super().__init__(f"Document {document_id!r} has no created timestamp")
