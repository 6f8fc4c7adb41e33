"""FastAPI application entry point.

Questions API - read-only listing of a fixed question collection.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from questions_api.cors import CorsPolicy, CorsPolicyMiddleware
from questions_api.errors import StartupDataError, rejection_response
from questions_api.routes import api_router
from questions_api.settings import Settings, get_settings
from questions_api.stores import QuestionStore

logger = logging.getLogger("uvicorn.error")


def create_app(
    settings: Settings | None = None,
    store: QuestionStore | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    The question store is loaded here, once; a missing or malformed payload
    raises StartupDataError and the application is not created.
    """
    settings = settings or get_settings()

    if store is None:
        try:
            store = QuestionStore.load()
        except StartupDataError:
            logger.exception("Question store load failed")
            raise

    # Every unregistered path must be a 404, including the docs routes and
    # trailing-slash variants of registered ones.
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Read-only question listing API",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.question_store = store

    # CORS middleware
    app.add_middleware(CorsPolicyMiddleware, policy=CorsPolicy.from_settings(settings))

    # Unmatched path or method, and request validation failures, collapse to 404
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return rejection_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        return rejection_response(exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Global exception handler for errors raised inside handlers.

        Runs in the outermost middleware: the exception is re-raised (and
        logged by the server) after this response is sent, and the response
        carries no CORS headers.
        """
        return PlainTextResponse(
            str(exc) if settings.debug else "Internal server error",
            status_code=500,
        )

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "questions_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level,
    )
