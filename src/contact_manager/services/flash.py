from typing import Optional
from urllib.parse import quote, unquote

from fastapi import Request, Response

from ..config import FLASH_COOKIE


def set_flash(response: Response, message: str) -> None:
    """Attach a one-shot confirmation message to a redirect response."""
    response.set_cookie(FLASH_COOKIE, quote(message), max_age=60, path="/", httponly=True, samesite="lax")


def read_flash(request: Request) -> Optional[str]:
    raw = request.cookies.get(FLASH_COOKIE)
    if not raw:
        return None
    return unquote(raw)


def clear_flash(response: Response) -> None:
    response.delete_cookie(FLASH_COOKIE, path="/")
