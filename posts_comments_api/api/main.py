"""
FastAPI application for the posts & comments API.

This module builds the application from an explicit route table and maps every
error the service can raise onto the JSON response envelope.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Callable, List, NamedTuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from posts_comments_api.api.endpoints import comments, posts
from posts_comments_api.config import get_settings
from posts_comments_api.core.comment_filter import CommentFilterError
from posts_comments_api.integrations.upstream_client import UpstreamClient, UpstreamError
from posts_comments_api.models.responses import (
    BAD_REQUEST_ERROR_RESPONSE_BODY,
    INTERNAL_SERVER_ERROR_RESPONSE_BODY,
    NOT_FOUND_ERROR_RESPONSE_BODY,
    ResponseBody,
    bad_request_response,
)


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable
    summary: str


async def health_check() -> dict:
    """
    Liveness endpoint.

    Returns:
        dict: Service name, version and current timestamp
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Anything not listed here falls through to the not-found envelope.
ROUTES: List[Route] = [
    Route("GET", "/top-posts", posts.get_top_posts_by_comments, "Posts ranked by comment count"),
    Route("POST", "/filtered-comments", comments.get_comments_by_filter, "Comments matching filters"),
    Route("GET", "/health", health_check, "Health Check"),
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Creates the shared upstream client on startup and closes it on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    app.state.upstream_client = UpstreamClient()

    yield

    logger.info("received shutdown signal, terminating...")
    await app.state.upstream_client.close()


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and known paths with the wrong method both answer 404."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.debug(f"No route for {request.method} {request.url.path}")
        return NOT_FOUND_ERROR_RESPONSE_BODY.to_response()

    return ResponseBody(status_code=exc.status_code, body=str(exc.detail)).to_response()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return BAD_REQUEST_ERROR_RESPONSE_BODY.to_response()


async def comment_filter_error_handler(request: Request, exc: CommentFilterError) -> JSONResponse:
    logger.warning(f"Rejected filter on field {exc.field!r}: {exc.message}")
    return bad_request_response(exc.message)


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    # detail stays in the log
    logger.error(f"Upstream request failed for {request.method} {request.url.path}: {exc.message}")
    return INTERNAL_SERVER_ERROR_RESPONSE_BODY.to_response()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""Read-only aggregation and filtering over a public posts/comments API.

        This API provides endpoints for:
        - Ranking posts by their number of comments
        - Filtering comments by field predicates combined with AND/OR""",
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    for route in ROUTES:
        app.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            summary=route.summary,
        )

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(CommentFilterError, comment_filter_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)

    return app


# Create the application instance
app = create_app()
