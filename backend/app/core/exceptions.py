"""Custom exceptions for the application."""
from typing import Any, ClassVar, Optional


class AppException(Exception):
    """Base application exception.

    Subclasses pick the HTTP status the API answers with through
    ``status_code``.
    """

    status_code: ClassVar[int] = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class BookIdCollisionError(AppException):
    """Every generated book id was already taken by an existing entry."""

    status_code = 500

    def __init__(self, book_id: str, attempts: int = 1):
        super().__init__(
            "Failed to add book: generated id already exists",
            error_code="BOOK_ID_COLLISION",
            details={"book_id": book_id, "attempts": attempts},
        )
        self.book_id = book_id
        self.attempts = attempts
