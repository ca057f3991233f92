"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.config import Settings, get_settings
from app.core.exceptions import AppException, BookIdCollisionError
from app.core.logging import get_logger, setup_logging
from app.schemas.common import ErrorResponse, HealthResponse, ProblemDetails
from app.services.book_store import BookStore

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    logger.info(f"{app.state.settings.app_name} starting")
    yield
    # The store is in-memory only; nothing to flush
    logger.info(f"Shutting down with {len(app.state.book_store)} book(s) in memory")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application together with the BookStore it owns."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Minimal in-memory Book Inventory API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.book_store = BookStore()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(BookIdCollisionError)
    async def collision_exception_handler(request: Request, exc: BookIdCollisionError):
        """Report an id collision as a problem document."""
        logger.error(f"Insert failed after {exc.attempts} attempt(s): {exc.message}")
        problem = ProblemDetails(
            title="Book could not be added",
            status=exc.status_code,
            detail=exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=problem.model_dump(),
            media_type="application/problem+json",
        )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Render any other AppException as an ErrorResponse."""
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        body = ErrorResponse(detail=exc.message, error_code=exc.error_code, details=exc.details)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(detail=str(exc.detail)).model_dump(exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Answer unexpected failures with a 500; the text is only exposed in debug."""
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

        content = {"detail": "Internal server error"}
        if settings.debug:
            content = {"detail": str(exc), "type": type(exc).__name__}
        return JSONResponse(status_code=500, content=content)

    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "books": len(request.app.state.book_store),
        }

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
