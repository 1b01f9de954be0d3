from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import get_db
from app.schemas.content_item import (
    ContentFormIn,
    ContentFormValues,
    ContentItemOut,
    ContentListOut,
    OptionOut,
    SubmitResult,
)
from app.services.authz import current_identity
from app.services.content_filters import ContentFilter, category_options, filter_items, status_options
from app.services.content_form import form_defaults, submit_content
from app.services.content_store import example_items, fetch_content_items, find_content_item, find_stored_item
from app.services.errors import ContentError
from app.services.presenters import present

router = APIRouter(prefix="/content", tags=["content"], dependencies=[Depends(current_identity)])

NO_MATCHES = "No se encontraron elementos que coincidan con sus filtros."
NO_CONTENT = "Aún no hay contenido para mostrar."


def _http_error(e: ContentError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.get("", response_model=ContentListOut)
def list_content(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    category: str = "all",
    status: str = "all",
    search: str = "",
    on: date | None = Query(None, alias="date", description="Suggested date, YYYY-MM-DD"),
    view: Literal["cards", "list", "raw"] = "cards",
):
    try:
        listing = fetch_content_items(db, settings)
    except ContentError as e:
        raise _http_error(e)

    criteria = ContentFilter(category=category, status=status, search=search, date=on)
    matched = filter_items(listing.items, criteria)

    empty_message = None
    if not matched:
        empty_message = NO_MATCHES if criteria.is_active else NO_CONTENT

    return ContentListOut(
        items=present(matched, view),
        categories=category_options(listing.items or example_items()),
        statuses=status_options(),
        total=len(listing.items),
        matched=len(matched),
        source=listing.source,
        empty_message=empty_message,
    )


@router.get("/categories", response_model=list[OptionOut])
def list_categories(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    try:
        listing = fetch_content_items(db, settings)
    except ContentError as e:
        raise _http_error(e)
    return category_options(listing.items or example_items())


@router.get("/form/new", response_model=ContentFormValues)
def new_form(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    duplicate_id: str | None = Query(None, alias="duplicateId"),
):
    if not duplicate_id:
        return form_defaults("create")
    try:
        source = find_content_item(db, settings, duplicate_id)
    except ContentError as e:
        raise _http_error(e)
    return form_defaults("duplicate", source)


@router.post("", response_model=SubmitResult, status_code=201)
def create_content(payload: ContentFormIn, db: Session = Depends(get_db)):
    try:
        return submit_content(db, payload)
    except ContentError as e:
        raise _http_error(e)


@router.get("/{cid}", response_model=ContentItemOut)
def get_content(cid: str, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    try:
        return find_content_item(db, settings, cid)
    except ContentError as e:
        raise _http_error(e)


@router.get("/{cid}/form", response_model=ContentFormValues)
def edit_form(cid: str, db: Session = Depends(get_db)):
    try:
        source = find_stored_item(db, cid)
    except ContentError as e:
        raise _http_error(e)
    return form_defaults("edit", source)


@router.put("/{cid}", response_model=SubmitResult)
def update_content(cid: str, payload: ContentFormIn, db: Session = Depends(get_db)):
    if payload.id and payload.id != cid:
        raise HTTPException(status_code=400, detail={"message": "Content id cannot be changed."})
    try:
        return submit_content(db, payload, content_id=cid)
    except ContentError as e:
        raise _http_error(e)
