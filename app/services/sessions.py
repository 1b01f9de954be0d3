import hashlib
import secrets

from fastapi import Response

from app.config import Settings

COOKIE_NAME = "cc_session"

def new_session_token() -> str:
    # urlsafe token ~ 43 chars for 32 bytes
    return secrets.token_urlsafe(32)

def hash_session_token(token: str) -> str:
    # only the digest is stored in user_sessions
    return hashlib.sha256(token.encode("utf-8")).hexdigest()

def set_session_cookie(resp: Response, token: str, settings: Settings):
    resp.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.is_production,  # HTTPS only in prod
        samesite="lax",
        max_age=settings.session_days * 24 * 60 * 60,
        path="/",
    )

def clear_session_cookie(resp: Response):
    resp.delete_cookie(COOKIE_NAME, path="/")
