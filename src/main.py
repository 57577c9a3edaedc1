"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth, root, thoughts
from src.config import Settings, get_settings
from src.context import AppContext
from src.database import init_db
from src.exceptions import InternalError, InvalidArgumentError, ThoughtsError
from src.services.seed import seed_thoughts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    context: AppContext = app.state.context
    if context.settings.reset_db:
        logger.info("RESET_DB is set, seeding database")
        init_db(context.engine)
        db = context.session_factory()
        try:
            seed_thoughts(db, context.settings.seed_author_email)
        finally:
            db.close()
    yield
    context.dispose()


async def thoughts_error_handler(request: Request, exc: ThoughtsError) -> JSONResponse:
    """Render application errors as response envelopes."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_body()),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and params as 400."""
    error = InvalidArgumentError("Invalid request body")
    body = error.to_body()
    body["errors"] = jsonable_encoder(exc.errors(), exclude={"ctx", "input", "url"})
    return JSONResponse(status_code=error.status_code, content=body)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Hide store failures behind a generic 500."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_body(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any other failure as a generic 500 envelope."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_body(),
    )


def configure_logging(settings: Settings) -> None:
    """Set up root logging for the process."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and its shared context."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Happy Thoughts API",
        description="Post, like and manage short happy thoughts",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = AppContext.from_settings(settings)

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ThoughtsError, thoughts_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routers
    app.include_router(root.router)
    app.include_router(auth.router)
    app.include_router(thoughts.router)

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run("src.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
