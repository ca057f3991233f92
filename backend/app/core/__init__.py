"""Core utilities."""
from app.core.exceptions import AppException, BookIdCollisionError
from app.core.logging import get_logger, setup_logging
from app.core.utils import IdFactory, new_book_id

__all__ = [
    # Exceptions
    "AppException",
    "BookIdCollisionError",
    # Logging
    "setup_logging",
    "get_logger",
    # Identifiers
    "IdFactory",
    "new_book_id",
]
