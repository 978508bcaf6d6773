# Standard library imports
import logging
from typing import Optional
from urllib.parse import urlencode, urlsplit

# External package imports
from fastapi import Request

# Local application imports
from ...application.dto.user_dto import UserResponse
from ..v1.dependencies import get_session_token, resolve_user

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/sign-in"
DEFAULT_AFTER_SIGN_IN = "/app"


class LoginRequiredError(Exception):
    """Raised by pages that need a session; handled by redirecting to sign-in."""

    def __init__(self, return_url: str) -> None:
        super().__init__("Login required")
        self.return_url = return_url

    @property
    def sign_in_url(self) -> str:
        return f"{SIGN_IN_PATH}?{urlencode({'redirect_url': self.return_url})}"


async def get_optional_page_user(request: Request) -> Optional[UserResponse]:
    token = get_session_token(request)
    if not token:
        return None
    try:
        return await resolve_user(token)
    except (ValueError, RuntimeError) as e:
        logger.debug("Ignoring invalid session cookie: %s", e)
        return None


async def require_page_user(request: Request) -> UserResponse:
    """
    FastAPI dependency for protected pages.

    Raises:
        LoginRequiredError: With the absolute URL of the requested page
    """
    user = await get_optional_page_user(request)
    if user is None:
        raise LoginRequiredError(str(request.url))
    return user


def safe_redirect_target(request: Request, redirect_url: Optional[str]) -> str:
    """Only follow return URLs that point back at this site."""
    if not redirect_url:
        return DEFAULT_AFTER_SIGN_IN
    base = str(request.base_url)
    target = redirect_url
    if target.startswith(base):
        target = "/" + target[len(base):]
    # Browsers drop tabs and newlines, and read "//host" or "/\host" as another site
    target = target.strip()
    if any(char in target for char in "\t\r\n\\"):
        return DEFAULT_AFTER_SIGN_IN
    if not target.startswith("/") or target.startswith("//"):
        return DEFAULT_AFTER_SIGN_IN
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return DEFAULT_AFTER_SIGN_IN
    return target


def with_notice(path: str, title: str, description: str = "", level: str = "success") -> str:
    """Append a one-shot notice to a redirect target."""
    query = {"notice": title, "level": level}
    if description:
        query["description"] = description
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(query)}"
