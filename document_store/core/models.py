"""
Data models for stored documents and search requests
"""
from typing import List, Optional
from pydantic import AwareDatetime, BaseModel


class Author(BaseModel):
    """Author embedded in a document"""
    id: str
    name: str


class Document(BaseModel):
    """
    A stored document

    ``id`` and ``created`` are finalized by ``DocumentStore.save``; a caller
    may leave both unset.
    """
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[AwareDatetime] = None


class SearchRequest(BaseModel):
    """
    Search criteria, combined with OR

    Every field is optional. An absent or empty field contributes no match,
    so a request with nothing set matches no document. Date bounds must be
    timezone-aware to compare against stored UTC timestamps.
    """
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[Optional[str]]] = None
    created_from: Optional[AwareDatetime] = None
    created_to: Optional[AwareDatetime] = None
