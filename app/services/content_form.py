from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.schemas.content_item import ContentFormIn, ContentFormValues, ContentItemOut, FormMode, SubmitResult
from app.services.content_store import ContentStore
from app.services.errors import PersistenceFailed
from app.utils.constants import COPY_SUFFIX, LIST_ROUTE

logger = logging.getLogger(__name__)


def form_defaults(mode: FormMode = "create", source: ContentItemOut | None = None) -> ContentFormValues:
    """
    Initial form values.

    create    -> empty form, status draft
    edit      -> everything from ``source``
    duplicate -> content from ``source`` as a new draft: no id, no date, title marked as a copy
    """
    if source is None or mode == "create":
        return ContentFormValues(mode="create")

    values = ContentFormValues(
        mode=mode,
        id=source.id,
        title=source.title,
        description=source.description or "",
        file_url=source.file_url,
        category=source.category,
        suggested_date=source.suggested_date,
        status=source.status,
        comments=source.comments or "",
    )

    if mode == "duplicate":
        values.id = None
        values.title = f"{source.title}{COPY_SUFFIX}"
        values.status = "draft"
        values.suggested_date = None

    return values


def to_document_values(form: ContentFormIn) -> dict[str, Any]:
    """Column values for the store, suggested date as YYYY-MM-DD."""
    return {
        "title": form.title,
        "description": form.description or None,
        "file_url": form.file_url,
        "category": form.category,
        "suggested_date": form.suggested_date.isoformat() if form.suggested_date else None,
        "status": form.status,
        "comments": form.comments or None,
    }


def submit_content(db: Session, form: ContentFormIn, content_id: str | None = None) -> SubmitResult:
    """Create (no ``content_id``) or update an item. Raises PersistenceFailed on store errors."""
    action = "update" if content_id else "create"
    store = ContentStore(db)
    values = to_document_values(form)

    try:
        if content_id:
            saved_id = store.update_item(content_id, values)
        else:
            saved_id = store.create_item(values)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error saving content (%s)", action)
        raise PersistenceFailed(action, form.model_dump(by_alias=True, mode="json"))

    logger.info("Content %sd: %s", action, saved_id)
    return SubmitResult(id=saved_id, redirect=LIST_ROUTE)
