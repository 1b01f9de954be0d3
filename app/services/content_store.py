from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import Settings
from app.data.example_content import example_content_items
from app.models.content_item import ContentItem
from app.schemas.content_item import ContentItemOut
from app.services.content_filters import sort_items
from app.services.errors import ContentNotFound, StoreUnavailable
from app.utils.constants import STATUSES
from app.utils.dates import format_suggested_date, timestamp_to_iso, utcnow

logger = logging.getLogger(__name__)


def normalize_document(doc_id: str, data: dict[str, Any]) -> ContentItemOut:
    """Turn a raw document (stored row or example record) into a ContentItemOut."""
    status = data.get("status")
    if status not in STATUSES:
        logger.warning("Document %s has unknown status %r, treating as draft", doc_id, status)
        status = "draft"

    return ContentItemOut(
        id=str(doc_id),
        title=data.get("title") or "",
        description=data.get("description") or None,
        file_url=data.get("fileUrl") or "",
        category=data.get("category") or "",
        suggested_date=format_suggested_date(data.get("suggestedDate")),
        status=status,
        comments=data.get("comments") or None,
        created_at=timestamp_to_iso(data.get("createdAt")),
        updated_at=timestamp_to_iso(data.get("updatedAt")),
    )


def example_items() -> list[ContentItemOut]:
    return [normalize_document(doc["id"], doc) for doc in example_content_items()]


class ContentStore:
    """Reads and writes the contentItems collection."""

    def __init__(self, db: Session):
        self.db = db

    def list_items(self) -> list[ContentItemOut]:
        rows = self.db.execute(select(ContentItem)).scalars().all()
        return [normalize_document(r.id, r.to_document()) for r in rows]

    def get_item(self, content_id: str) -> ContentItemOut | None:
        row = self.db.get(ContentItem, content_id)
        if not row:
            return None
        return normalize_document(row.id, row.to_document())

    def create_item(self, values: dict[str, Any]) -> str:
        now = utcnow()
        row = ContentItem(**values, created_at=now, updated_at=now)
        self.db.add(row)
        self.db.commit()
        return row.id

    def update_item(self, content_id: str, values: dict[str, Any]) -> str:
        row = self.db.get(ContentItem, content_id)
        if not row:
            raise ContentNotFound(content_id)

        for key, value in values.items():
            setattr(row, key, value)
        row.updated_at = utcnow()

        self.db.commit()
        return row.id


@dataclass
class ContentListing:
    items: list[ContentItemOut]
    source: Literal["store", "examples"]


def fetch_content_items(db: Session, settings: Settings) -> ContentListing:
    """All items sorted by suggested date, or the example dataset when the store has nothing to give."""
    try:
        items = ContentStore(db).list_items()
    except SQLAlchemyError as e:
        db.rollback()
        if not settings.use_example_fallback:
            logger.error("Content fetch failed: %s", e)
            raise StoreUnavailable("Could not load content.") from e
        logger.warning("Content store unreachable, serving example data: %s", e)
        return ContentListing(items=sort_items(example_items()), source="examples")

    if not items and settings.use_example_fallback:
        logger.info("Content store is empty, serving example data")
        return ContentListing(items=sort_items(example_items()), source="examples")

    return ContentListing(items=sort_items(items), source="store")


def find_content_item(db: Session, settings: Settings, content_id: str) -> ContentItemOut:
    item = None
    try:
        item = ContentStore(db).get_item(content_id)
    except SQLAlchemyError as e:
        db.rollback()
        if not settings.use_example_fallback:
            raise StoreUnavailable("Could not load content.") from e
        logger.warning("Content store unreachable while loading %s: %s", content_id, e)

    if item is None and settings.use_example_fallback:
        item = next((x for x in example_items() if x.id == content_id), None)

    if item is None:
        raise ContentNotFound(content_id)
    return item


def find_stored_item(db: Session, content_id: str) -> ContentItemOut:
    """Store-only lookup, for flows that write back (examples are read-only)."""
    try:
        item = ContentStore(db).get_item(content_id)
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreUnavailable("Could not load content.") from e
    if item is None:
        raise ContentNotFound(content_id)
    return item
