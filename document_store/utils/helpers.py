"""
Utility functions for the document store
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

UUID_TEXT_LENGTH = 36
DEFAULT_ID_LENGTH = 10


def generate_document_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """
    Generate a short document identifier

    Args:
        length: Number of leading characters kept from a random UUID4

    Returns:
        Identifier string of exactly ``length`` characters
    """
    if not 1 <= length <= UUID_TEXT_LENGTH:
        raise ValueError(f"Identifier length must be between 1 and {UUID_TEXT_LENGTH}, got {length}")

    return str(uuid.uuid4())[:length]


def is_blank(value: Optional[str]) -> bool:
    """
    Check if a string is missing, empty or whitespace only

    Args:
        value: String to check

    Returns:
        True if value is blank, False otherwise
    """
    return value is None or not value.strip()


def utc_now() -> datetime:
    """Current wall-clock time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)
