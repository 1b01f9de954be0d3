import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.dates import utcnow


class ContentItem(Base):
    # the "contentItems" collection
    __tablename__ = "content_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    file_url: Mapped[str] = mapped_column(String(1500), nullable=False)

    # branding | promociones | tips | campañas | otro
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    # YYYY-MM-DD, None means unscheduled
    suggested_date: Mapped[str | None] = mapped_column(String(10), nullable=True, index=True)
    # draft | approved | published
    status: Mapped[str] = mapped_column(String(20), default="draft")

    comments: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_document(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "fileUrl": self.file_url,
            "category": self.category,
            "suggestedDate": self.suggested_date,
            "status": self.status,
            "comments": self.comments,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
