"""Pydantic schemas for the book endpoints.

Wire field names are PascalCase (``Title``, ``BookId``...); the Python
attributes stay snake_case and are mapped through aliases.
"""
from pydantic import BaseModel, ConfigDict, Field

from app.models.book import Book


class BookBase(BaseModel):
    """Fields shared by book requests and responses."""

    title: str = Field(..., alias="Title")
    author: str = Field(..., alias="Author")
    isbn: str = Field(..., alias="ISBN")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BookCreate(BookBase):
    """Body of POST /addBook."""

    def to_book(self) -> Book:
        return Book(title=self.title, author=self.author, isbn=self.isbn)


class BookResponse(BookBase):
    """Body returned by GET /books/{id}."""

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls(title=book.title, author=book.author, isbn=book.isbn)


class BookIdResponse(BaseModel):
    """Body returned by a successful POST /addBook."""

    book_id: str = Field(..., alias="BookId")

    model_config = ConfigDict(populate_by_name=True)


class BookNotFoundResponse(BaseModel):
    """Body returned by GET /books/{id} when the id is unknown."""

    message: str = Field("Book not found", alias="Message")
    book_id: str = Field(..., alias="BookId")

    model_config = ConfigDict(populate_by_name=True)
