"""Thread-safe in-memory book store."""
import threading
from typing import Optional

from app.core.logging import get_logger
from app.core.utils import IdFactory, new_book_id
from app.models.book import Book, BookId, InsertResult

logger = get_logger("book_store")


class BookStore:
    """
    In-memory mapping of generated book ids to books.

    The lock is held only for a single check-and-set or a single read.
    Entries are write-once: there is no update or delete.
    """

    def __init__(self, id_factory: IdFactory = new_book_id):
        self._books: dict[BookId, Book] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory

    def insert(self, book: Book) -> InsertResult:
        """Store ``book`` under a newly generated id.

        Returns a failed result, without touching the existing entry, if the
        generated id is already taken. Retrying is left to the caller.
        """
        book_id = self._id_factory()
        with self._lock:
            if book_id in self._books:
                collided = True
            else:
                self._books[book_id] = book
                collided = False

        if collided:
            logger.warning(f"Generated book id {book_id} already exists, insert rejected")
            return InsertResult.collision(book_id)

        logger.debug(f"Stored book {book_id}: {book.title!r}")
        return InsertResult.success(book_id)

    def lookup(self, book_id: BookId) -> Optional[Book]:
        """Return the book stored under ``book_id``, or None if there is none."""
        with self._lock:
            return self._books.get(book_id)

    def __contains__(self, book_id: object) -> bool:
        with self._lock:
            return book_id in self._books

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)
