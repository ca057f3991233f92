"""Identifier generation helpers."""
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def new_book_id() -> str:
    """Return a random 128-bit identifier in canonical UUID text form."""
    return str(uuid.uuid4())
