"""Domain models."""
from app.models.book import Book, BookId, InsertResult

__all__ = [
    "Book",
    "BookId",
    "InsertResult",
]
