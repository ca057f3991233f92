"""Business logic services."""
from app.services.book_store import BookStore

__all__ = [
    "BookStore",
]
