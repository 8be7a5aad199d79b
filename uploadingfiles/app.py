"""The web application: upload form, file listing and file serving."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from .__version__ import __version__
from .exception_handlers import register_exception_handlers
from .routes import files_router
from .settings import Settings, settings as default_settings
from .toolkit.file_storage import LocalFileStorage
from .toolkit.loguru_logging import logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging and make sure the storage directory exists before serving anything."""
    setup_logging(app.state.settings)
    app.state.storage_service.init()
    logger.info(f"Storing files in {app.state.storage_service.root_location}")

    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings (the global ones by default)."""
    settings = settings or default_settings

    app = FastAPI(
        title="Uploading Files",
        description="Upload files through a browser form, list them and serve them back.",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    # Importing this module must not touch global state: logging is configured on startup
    app.state.settings = settings
    app.state.storage_service = LocalFileStorage(settings.STORAGE_LOCATION)

    register_exception_handlers(app)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE_NAME,
    )

    app.include_router(files_router)

    return app


app = create_app()
