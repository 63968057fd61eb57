import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .config import Settings, get_settings
from .database import create_db_engine, create_session_factory, init_db
from .errors import AppError
from .routers import auth, dashboard, posts, users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def app_error_handler(request: Request, exc: AppError):
    """Render a domain error as ``{"message": ...}`` with its status"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url, exc)
    return JSONResponse(
        status_code=exc.status_code, content={"message": exc.message}
    )


def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": errors},
    )


def general_exception_handler(request: Request, exc: Exception):
    """Log unexpected exceptions and hide their details from the client"""
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url
    )
    return JSONResponse(
        status_code=500, content={"message": "Internal server error"}
    )


async def log_requests(request: Request, call_next):
    """Middleware to log request processing time and status."""
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = time.perf_counter() - start_time
    logger.info(
        f"{request.method} {request.url.path} - {response.status_code} "
        f"- {process_time:.4f}s"
    )
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit settings object"""
    settings = settings or get_settings()
    engine = create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            init_db(engine)
        except SQLAlchemyError:
            logger.critical("Could not connect to the database", exc_info=True)
            raise
        yield
        engine.dispose()

    app = FastAPI(
        title="Social API",
        description="API for users, friendships, posts and likes",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(posts.router)
    app.include_router(dashboard.router)

    # Uploaded pictures
    os.makedirs(settings.upload_dir, exist_ok=True)
    app.mount(
        "/assets", StaticFiles(directory=settings.upload_dir), name="assets"
    )

    @app.get("/")
    def root():
        return {"message": "Social API is running"}

    return app
