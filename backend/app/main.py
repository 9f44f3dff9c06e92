"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api import api_router
from app.config import Settings, get_settings
from app.core.exceptions import AppException, NotFoundError
from app.core.logging import get_logger, setup_logging
from app.schemas.common import HealthResponse
from app.services.book_store import BookStore

logger = get_logger("main")


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a one-line client message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ())]
    if error.get("type") == "json_invalid":
        return "Malformed JSON body"
    if loc and loc[0] == "path":
        return f"Invalid {loc[-1]}: must be a non-negative integer"
    field = ".".join(loc[1:]) if len(loc) > 1 else "body"
    return f"{field}: {error.get('msg', 'invalid value')}"


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookStore] = None,
) -> FastAPI:
    """Build the application with its own book store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        logger.info(f"{settings.app_name} {settings.version} started")
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book collection API",
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.book_store = store if store is not None else BookStore()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and path ids are client errors."""
        message = describe_validation_error(exc)
        logger.info(f"{request.method} {request.url.path} rejected: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        """Handle lookups of unknown ids."""
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message} {exc.details}")
            message = exc.message if settings.debug else "Internal server error"
        else:
            message = exc.message
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"error": str(exc), "type": type(exc).__name__},
            )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # Include API router
    app.include_router(api_router)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "books": len(app.state.book_store),
        }

    # Static page
    index_file = settings.static_dir / "index.html"
    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    @app.get("/", include_in_schema=False)
    async def root():
        """Serve the static front page, or service info when it is missing."""
        if index_file.is_file():
            return FileResponse(index_file)
        return {
            "name": settings.app_name,
            "version": settings.version,
            "docs": "/docs",
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
