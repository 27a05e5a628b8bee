"""
Search criteria handlers

Each handler tests one search dimension and returns False when the request
does not set that dimension.
"""
from typing import Callable, Tuple
from document_store.core.exceptions import MissingTimestampError
from document_store.core.models import Document, SearchRequest

Criterion = Callable[[Document, SearchRequest], bool]


def matches_title_prefix(document: Document, request: SearchRequest) -> bool:
    """True if the document title starts with any requested prefix"""
    if not request.title_prefixes:
        return False

    return any(
        document.title is not None and document.title.startswith(prefix)
        for prefix in request.title_prefixes
    )


def matches_content(document: Document, request: SearchRequest) -> bool:
    """True if the document content contains any requested substring"""
    if not request.contains_contents:
        return False

    return any(
        document.content is not None and fragment in document.content
        for fragment in request.contains_contents
    )


def matches_author_id(document: Document, request: SearchRequest) -> bool:
    """
    True if the document's author id is among the requested ids

    An unauthored document is looked up as ``None``, so it only matches a
    list that contains a ``None`` entry.
    """
    if not request.author_ids:
        return False

    author_id = document.author.id if document.author is not None else None
    return author_id in request.author_ids


def matches_created_from(document: Document, request: SearchRequest) -> bool:
    """True if the document was created at or after ``created_from``"""
    if request.created_from is None:
        return False

    if document.created is None:
        raise MissingTimestampError(document.id)
    return document.created >= request.created_from


def matches_created_to(document: Document, request: SearchRequest) -> bool:
    """True if the document was created at or before ``created_to``"""
    if request.created_to is None:
        return False

    if document.created is None:
        raise MissingTimestampError(document.id)
    return document.created <= request.created_to


CRITERIA: Tuple[Criterion, ...] = (
    matches_title_prefix,
    matches_content,
    matches_author_id,
    matches_created_from,
    matches_created_to,
)
