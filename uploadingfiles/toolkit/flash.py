"""One-shot ("flash") messages carried over a redirect in the session cookie."""

from starlette.requests import Request

FLASH_SESSION_KEY = "_flash_message"


def flash(request: Request, message: str) -> None:
    """Attach a message to be shown on the next page load."""
    request.session[FLASH_SESSION_KEY] = message


def pop_flash(request: Request) -> str | None:
    """Return the pending message (if any) and forget it."""
    return request.session.pop(FLASH_SESSION_KEY, None)
