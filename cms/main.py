# cms/main.py

"""CMS Backend - categories, tags, pages, posts, threaded comments and media."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from cms.configs import settings
from cms.errors import (
    BaseAppError,
    DatabaseError,
    UploadError,
    create_exception_handler,
    database_exception_handler,
    upload_exception_handler,
    validation_exception_handler,
)
from cms.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from cms.monitoring import get_logger
from cms.monitoring.health import setup_health_routes
from cms.routes import (
    categories_router,
    comments_router,
    media_router,
    pages_router,
    posts_router,
    tags_router,
)

API_PREFIX = "/api"

logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Content management API for categories, tags, pages, posts, comments and media",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    categories_router,
    tags_router,
    pages_router,
    posts_router,
    comments_router,
    media_router,
]

_ = [app.include_router(router, prefix=API_PREFIX) for router in routes]

errors = [
    (DatabaseError, database_exception_handler),
    (UploadError, upload_exception_handler),
    (BaseAppError, create_exception_handler(logger)),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

setup_health_routes(app)

# Stored paths look like "uploads/images/<id>.png"
app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False), name="uploads")


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": "Welcome to CMS Backend"},
                },
            },
        },
    },
    operation_id="root_access",
)
async def root() -> ORJSONResponse:
    """
    Root endpoint.

    Returns
    -------
    ORJSONResponse
        Welcome message payload.

    Examples
    --------
    Request
        GET /
    Response
        200 OK
        {"message": "Welcome to CMS Backend"}
    """
    return ORJSONResponse(content={"message": f"Welcome to {app.title}"})


if __name__ == "__main__":
    from uvicorn import run

    run(
        "cms.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
        loop="uvloop",
        http="httptools",
    )
