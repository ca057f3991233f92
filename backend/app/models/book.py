"""Book domain models for the in-memory store."""
from dataclasses import dataclass

BookId = str


@dataclass(frozen=True)
class Book:
    """A book record. Immutable, so readers can never alter stored state."""

    title: str
    author: str
    isbn: str


@dataclass(frozen=True)
class InsertResult:
    """Outcome of BookStore.insert.

    ``ok`` is False only when the generated id was already present; the
    existing entry is left untouched in that case.
    """

    ok: bool
    book_id: BookId

    @classmethod
    def success(cls, book_id: BookId) -> "InsertResult":
        return cls(ok=True, book_id=book_id)

    @classmethod
    def collision(cls, book_id: BookId) -> "InsertResult":
        return cls(ok=False, book_id=book_id)
