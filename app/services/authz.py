from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session as DbSession

from app.config import Settings, get_settings
from app.database import get_db
from app.models.session import Session
from app.models.user import User
from app.services.passwords import check_password
from app.services.sessions import COOKIE_NAME, hash_session_token, new_session_token
from app.utils.dates import to_utc_datetime, utcnow

logger = logging.getLogger(__name__)

MOCK_USER_ID = "mock-uid"
MOCK_DISPLAY_NAME = "Ileana Mock"


@dataclass
class Identity:
    id: str
    email: str
    display_name: str | None = None
    is_mock: bool = False


class InvalidCredentials(Exception):
    pass


def mock_identity(settings: Settings) -> Identity:
    return Identity(id=MOCK_USER_ID, email=settings.allowed_email, display_name=MOCK_DISPLAY_NAME, is_mock=True)


def is_allowed(identity: Identity | None, settings: Settings) -> bool:
    """Single-user allow-list: the signed-in email must be the configured one."""
    if identity is None or not identity.email:
        return False
    return identity.email.strip().lower() == settings.allowed_email.strip().lower()


def sign_in(db: DbSession, email: str, password: str) -> Identity:
    """Email/password check against the identity store."""
    email = email.lower().strip()
    user = db.query(User).filter(User.email == email).first()
    if not user or not user.is_active:
        raise InvalidCredentials("Invalid email or password.")

    ok, new_hash = check_password(password, user.password_hash)
    if not ok:
        raise InvalidCredentials("Invalid email or password.")
    if new_hash:
        logger.info("Upgrading password hash for %s", user.email)
        user.password_hash = new_hash
        db.commit()
    return Identity(id=str(user.id), email=user.email, display_name=user.display_name)


def open_session(db: DbSession, identity: Identity, req: Request, settings: Settings) -> str:
    """Persist a new session and return the raw token for the cookie."""
    token = new_session_token()
    sess = Session(
        user_id=uuid.UUID(identity.id),
        session_token=hash_session_token(token),
        expires_at=utcnow() + timedelta(days=settings.session_days),
        revoked_at=None,
        user_agent=req.headers.get("user-agent"),
        ip_address=req.client.host if req.client else None,
    )
    db.add(sess)
    db.commit()
    return token


def revoke_session(db: DbSession, raw_token: str | None) -> None:
    if not raw_token:
        return
    sh = hash_session_token(raw_token)
    sess = db.query(Session).filter(Session.session_token == sh, Session.revoked_at.is_(None)).first()
    if sess:
        sess.revoked_at = utcnow()
        db.commit()


def identity_from_session(db: DbSession, raw_token: str | None) -> Identity:
    if not raw_token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    sh = hash_session_token(raw_token)
    sess = db.query(Session).filter(Session.session_token == sh, Session.revoked_at.is_(None)).first()
    if not sess or to_utc_datetime(sess.expires_at) < utcnow():
        raise HTTPException(status_code=401, detail="Session expired")

    user = db.query(User).filter(User.id == sess.user_id).first()
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="User not found")
    return Identity(id=str(user.id), email=user.email, display_name=user.display_name)


def current_identity(
    req: Request,
    db: DbSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if settings.auth_bypass:
        return mock_identity(settings)

    identity = identity_from_session(db, req.cookies.get(COOKIE_NAME))
    if not is_allowed(identity, settings):
        # allow-list changed after the session was opened
        revoke_session(db, req.cookies.get(COOKIE_NAME))
        raise HTTPException(status_code=403, detail="Access denied")
    return identity
