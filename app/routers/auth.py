import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session as DbSession

from app.config import Settings, get_settings
from app.database import get_db
from app.schemas.auth import IdentityOut, LoginIn
from app.services.authz import (
    Identity,
    InvalidCredentials,
    current_identity,
    is_allowed,
    open_session,
    revoke_session,
    sign_in,
)
from app.services.sessions import COOKIE_NAME, clear_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _identity_out(identity: Identity) -> IdentityOut:
    return IdentityOut(
        id=identity.id,
        email=identity.email,
        display_name=identity.display_name,
        is_mock=identity.is_mock,
    )


@router.post("/login")
def login(
    payload: LoginIn,
    req: Request,
    resp: Response,
    db: DbSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    try:
        identity = sign_in(db, payload.email, payload.password)
    except InvalidCredentials as e:
        raise HTTPException(status_code=401, detail=str(e))

    if not is_allowed(identity, settings):
        logger.info("Sign-in denied for %s", identity.email)
        revoke_session(db, req.cookies.get(COOKIE_NAME))
        denied = JSONResponse(
            status_code=403,
            content={"detail": "Access denied. You do not have permission to access this application."},
        )
        clear_session_cookie(denied)
        return denied

    token = open_session(db, identity, req, settings)
    set_session_cookie(resp, token, settings)
    return {"ok": True, "user": _identity_out(identity)}


@router.post("/logout")
def logout(req: Request, resp: Response, db: DbSession = Depends(get_db)):
    revoke_session(db, req.cookies.get(COOKIE_NAME))
    clear_session_cookie(resp)
    return {"ok": True}


@router.get("/me", response_model=IdentityOut)
def me(identity: Identity = Depends(current_identity)):
    return _identity_out(identity)
