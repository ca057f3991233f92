"""Book API routes."""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.config import Settings
from app.core.exceptions import BookIdCollisionError
from app.core.logging import get_logger
from app.dependencies import get_app_settings, get_book_store
from app.schemas.book import (
    BookCreate,
    BookIdResponse,
    BookNotFoundResponse,
    BookResponse,
)
from app.schemas.common import ProblemDetails
from app.services.book_store import BookStore

logger = get_logger("api.books")

router = APIRouter(tags=["Books"])


@router.post(
    "/addBook",
    response_model=BookIdResponse,
    responses={
        500: {"model": ProblemDetails, "description": "Generated book id already exists."},
    },
)
async def add_book(
    book_data: BookCreate,
    store: BookStore = Depends(get_book_store),
    settings: Settings = Depends(get_app_settings),
) -> BookIdResponse:
    """Add a book and return its generated id."""
    book = book_data.to_book()

    for attempt in range(1, settings.insert_attempts + 1):
        result = store.insert(book)
        if result.ok:
            logger.info(f"Added book {result.book_id}")
            return BookIdResponse(book_id=result.book_id)
        if attempt < settings.insert_attempts:
            logger.info(f"Retrying insert ({attempt}/{settings.insert_attempts})")

    raise BookIdCollisionError(result.book_id, attempts=settings.insert_attempts)


@router.get(
    "/books/{book_id}",
    response_model=BookResponse,
    responses={
        404: {"model": BookNotFoundResponse, "description": "Book not found."},
    },
)
async def get_book(
    book_id: str,
    store: BookStore = Depends(get_book_store),
):
    """Get a book by id."""
    book = store.lookup(book_id)
    if book is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=BookNotFoundResponse(book_id=book_id).model_dump(by_alias=True),
        )
    return BookResponse.from_book(book)
