"""Maps the storage exceptions to HTTP responses.

Register with `register_exception_handlers(app)`.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse, Response

from .exceptions import StorageFailure, StorageFileNotFound
from .toolkit.loguru_logging import logger


def _storage_file_not_found_handler(request: Request, exc: StorageFileNotFound) -> Response:
    """Return an empty 404."""
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _storage_failure_handler(request: Request, exc: StorageFailure) -> Response:
    logger.opt(exception=exc).error(f"{request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the storage error handlers. The most specific exception class wins."""
    app.add_exception_handler(StorageFileNotFound, _storage_file_not_found_handler)
    app.add_exception_handler(StorageFailure, _storage_failure_handler)
