from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from app.schemas.content_item import ContentItemOut, OptionOut
from app.utils.constants import ALL, ALL_CATEGORIES_LABEL, ALL_STATUSES_LABEL, STATUS_LABELS
from app.utils.dates import format_suggested_date


@dataclass
class ContentFilter:
    category: str = ALL
    status: str = ALL
    search: str = ""
    date: date | None = None

    @property
    def is_active(self) -> bool:
        return (
            self.category != ALL
            or self.status != ALL
            or bool(self.search.strip())
            or self.date is not None
        )


def _matches_search(item: ContentItemOut, term: str) -> bool:
    if not term:
        return True
    if item.title and term in item.title.lower():
        return True
    return bool(item.description and term in item.description.lower())


def matches(item: ContentItemOut, criteria: ContentFilter) -> bool:
    if criteria.category != ALL and item.category != criteria.category:
        return False
    if criteria.status != ALL and item.status != criteria.status:
        return False
    if not _matches_search(item, criteria.search.strip().lower()):
        return False
    if criteria.date is not None:
        return format_suggested_date(item.suggested_date) == criteria.date.isoformat()
    return True


def filter_items(items: Iterable[ContentItemOut], criteria: ContentFilter) -> list[ContentItemOut]:
    """Items satisfying every active predicate, input order kept."""
    return [it for it in items if matches(it, criteria)]


def sort_items(items: Iterable[ContentItemOut]) -> list[ContentItemOut]:
    """
    Newest suggested date first. Items without a usable date go last,
    in the order they came in.
    """
    dated: list[tuple[str, ContentItemOut]] = []
    undated: list[ContentItemOut] = []
    for it in items:
        d = format_suggested_date(it.suggested_date)
        if d:
            dated.append((d, it))
        else:
            undated.append(it)

    # reverse=True keeps equal keys in input order
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [it for _, it in dated] + undated


def capitalize_label(value: str) -> str:
    return value[:1].upper() + value[1:]


def category_options(items: Iterable[ContentItemOut]) -> list[OptionOut]:
    seen: list[str] = []
    for it in items:
        if it.category and it.category not in seen:
            seen.append(it.category)
    return [OptionOut(value=ALL, label=ALL_CATEGORIES_LABEL)] + [
        OptionOut(value=c, label=capitalize_label(c)) for c in seen
    ]


def status_options() -> list[OptionOut]:
    return [OptionOut(value=ALL, label=ALL_STATUSES_LABEL)] + [
        OptionOut(value=k, label=v) for k, v in STATUS_LABELS.items()
    ]


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)
