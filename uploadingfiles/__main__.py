"""Run the application with `python -m uploadingfiles`."""

import uvicorn

from .settings import settings


def main():
    """Serve the app with `uvicorn`."""
    uvicorn.run("uploadingfiles.app:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
