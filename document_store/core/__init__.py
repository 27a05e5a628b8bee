"""
Core models, errors and configuration for the document store.
"""
from .config import Config, StoreConfig, LoggingConfig
from .exceptions import (
    DocumentStoreError, InvalidIdError, DuplicateIdentifierError, MissingTimestampError
)
from .models import Author, Document, SearchRequest

__all__ = [
    'Config', 'StoreConfig', 'LoggingConfig',
    'DocumentStoreError', 'InvalidIdError', 'DuplicateIdentifierError', 'MissingTimestampError',
    'Author', 'Document', 'SearchRequest',
]
