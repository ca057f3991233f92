"""FastAPI dependencies for the book store and settings."""
from fastapi import Request

from app.config import Settings
from app.services.book_store import BookStore


def get_book_store(request: Request) -> BookStore:
    """
    Dependency to get the BookStore owned by the running application.
    """
    return request.app.state.book_store


def get_app_settings(request: Request) -> Settings:
    """
    Dependency to get the settings the application was built with.
    """
    return request.app.state.settings
