from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.utils.constants import CATEGORIES

Status = Literal["draft", "approved", "published"]
FormMode = Literal["create", "edit", "duplicate"]

_url = TypeAdapter(AnyUrl)


class CamelModel(BaseModel):
    # documents use camelCase field names (fileUrl, suggestedDate, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentItemOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    file_url: str
    category: str
    suggested_date: Optional[str] = None
    status: Status
    comments: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ContentFormIn(CamelModel):
    """Payload of the create/edit form. Rejected field by field before anything is stored."""

    id: Optional[str] = None
    title: str
    description: Optional[str] = None
    file_url: str
    category: str
    suggested_date: Optional[date] = None
    status: Status = "draft"
    comments: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _title_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required.")
        return v

    @field_validator("file_url")
    @classmethod
    def _valid_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("File URL is required.")
        try:
            _url.validate_python(v)
        except ValidationError:
            raise ValueError("Please enter a valid URL.")
        # keep the link exactly as typed
        return v

    @field_validator("category")
    @classmethod
    def _known_category(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category is required.")
        if v not in CATEGORIES:
            raise ValueError(f"Unknown category: {v}")
        return v

    @field_validator("suggested_date", mode="before")
    @classmethod
    def _blank_date(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContentFormValues(CamelModel):
    """Initial values for the form in create, edit or duplicate mode."""

    mode: FormMode
    id: Optional[str] = None
    title: str = ""
    description: str = ""
    file_url: str = ""
    category: str = ""
    suggested_date: Optional[str] = None
    status: Status = "draft"
    comments: str = ""
    categories: list[str] = Field(default_factory=lambda: list(CATEGORIES))


class OptionOut(BaseModel):
    value: str
    label: str


class ContentListOut(CamelModel):
    items: list[dict[str, Any]]
    categories: list[OptionOut]
    statuses: list[OptionOut]
    total: int
    matched: int
    source: Literal["store", "examples"]
    empty_message: Optional[str] = None


class SubmitResult(BaseModel):
    ok: bool = True
    id: str
    redirect: str
