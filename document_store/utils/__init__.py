from .helpers import generate_document_id, is_blank, utc_now
from .logger import setup_logging, setup_logging_from_config, get_logger

__all__ = [
    'generate_document_id', 'is_blank', 'utc_now',
    'setup_logging', 'setup_logging_from_config', 'get_logger',
]
