"""
In-memory document storage.
"""
from .store import DocumentStore

__all__ = ['DocumentStore']
