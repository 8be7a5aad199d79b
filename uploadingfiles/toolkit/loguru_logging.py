"""The module routes all the application logs (and the ones coming to the `logging` module) through `loguru`."""

import logging
import sys

from loguru import logger

from ..settings import Settings


class InterceptHandler(logging.Handler):
    """The `logging` logs interceptor (`uvicorn`, `starlette` and friends)."""

    def emit(self, record):
        """Intercept the `logging` logs and redirect them to `loguru`."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the `logging` module so `loguru` reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: Settings) -> None:
    """(Re)configure the `loguru` sinks for the given settings.

    JSON lines on stderr unless `DEBUG` is on, plus daily-rotated files under `logs/` if enabled.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        serialize=not settings.DEBUG,
        backtrace=True,
        diagnose=False,
    )

    if settings.DO_USE_FILE_LOGS:
        logger.add("logs/{time}.log", level=settings.LOG_LEVEL, encoding="utf-8", rotation="00:00")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # `uvicorn` installs its own handlers unless told otherwise; send everything through the root one
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True


__all__ = ["logger", "InterceptHandler", "setup_logging"]
