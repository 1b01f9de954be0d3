from typing import Any

from app.schemas.content_item import ContentItemOut
from app.services.content_filters import capitalize_label, status_label
from app.utils.constants import UNTITLED
from app.utils.dates import parse_suggested_date


def edit_link(item: ContentItemOut) -> str:
    return f"/dashboard/edit/{item.id}"


def duplicate_link(item: ContentItemOut) -> str:
    return f"/dashboard/new?duplicateId={item.id}"


def to_card(item: ContentItemOut) -> dict[str, Any]:
    data = item.model_dump(by_alias=True)
    data.update(
        statusLabel=status_label(item.status),
        categoryLabel=capitalize_label(item.category),
        editUrl=edit_link(item),
        duplicateUrl=duplicate_link(item),
    )
    return data


def to_list_row(item: ContentItemOut) -> dict[str, Any]:
    d = parse_suggested_date(item.suggested_date)
    return {
        "id": item.id,
        "title": item.title or UNTITLED,
        "category": item.category,
        "categoryLabel": capitalize_label(item.category),
        "suggestedDate": item.suggested_date,
        "suggestedDateShort": d.strftime("%d/%m/%Y") if d else None,
        "status": item.status,
        "statusLabel": status_label(item.status),
        "editUrl": edit_link(item),
        "duplicateUrl": duplicate_link(item),
    }


def present(items: list[ContentItemOut], view: str) -> list[dict[str, Any]]:
    if view == "list":
        return [to_list_row(it) for it in items]
    if view == "raw":
        return [it.model_dump(by_alias=True) for it in items]
    return [to_card(it) for it in items]
