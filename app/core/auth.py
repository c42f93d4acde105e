# app/core/auth.py
import logging

from fastapi import Depends, HTTPException, Request, Response, status

from app.core.config import get_settings
from app.core.security import sign_session_token, unsign_session_token
from app.core.sessions import SessionStore, get_session_store

settings = get_settings()

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED = "Não autenticado."


def get_session_token(request: Request) -> str | None:
    """
    Extract the session id from the signed session cookie.

    Returns None when the cookie is missing or its signature does not
    verify; both cases are treated as "no session".
    """
    cookie = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not cookie:
        return None
    return unsign_session_token(cookie)


def get_current_user_id(
    token: str | None = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
) -> int | None:
    """
    Resolve the logged-in user id from the session store.

    Returns:
        user id for a live session, else None (anonymous).
    """
    return store.get(token)


def require_auth(user_id: int | None = Depends(get_current_user_id)) -> int:
    """
    Enforce authentication.

    Attached to every protected route; runs before the handler so no
    storage access happens for anonymous callers.

    Returns:
        The authenticated user's id.

    Raises:
        HTTPException(401): no cookie, bad signature, unknown or
        expired session.
    """
    if user_id is None:
        logger.debug("Rejected request without a valid session")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
        )
    return user_id


def set_session_cookie(response: Response, token: str) -> None:
    """Send the signed session id as an HTTP-only cookie (absolute 24h)."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_token(token),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
