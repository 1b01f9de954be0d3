from datetime import date

import pytest
from pydantic import ValidationError

from conftest import make_item

from app.schemas.content_item import ContentFormIn
from app.services.content_form import form_defaults, to_document_values


def _payload(**kw):
    data = {
        "title": "Promo Verano",
        "fileUrl": "https://drive.google.com/file/d/abc/view",
        "category": "promociones",
    }
    data.update(kw)
    return data


def test_create_defaults_are_empty_drafts():
    values = form_defaults("create")
    assert values.mode == "create"
    assert values.id is None
    assert values.title == ""
    assert values.status == "draft"
    assert "campañas" in values.categories


def test_edit_defaults_copy_everything():
    source = make_item("abc", "Tip", "tips", "approved", suggested_date="2024-08-22", comments="ok")
    values = form_defaults("edit", source)
    assert values.id == "abc"
    assert values.status == "approved"
    assert values.suggested_date == "2024-08-22"
    assert values.comments == "ok"


def test_duplicate_resets_identity_schedule_and_status():
    source = make_item(
        "abc",
        "Tip: Optimiza tu SEO Local",
        "tips",
        "published",
        description="Cinco pasos",
        suggested_date="2024-08-22",
        comments="Revisar",
    )
    values = form_defaults("duplicate", source)
    assert values.mode == "duplicate"
    assert values.id is None
    assert values.title == "Tip: Optimiza tu SEO Local (Copia)"
    assert values.status == "draft"
    assert values.suggested_date is None
    assert values.description == "Cinco pasos"
    assert values.file_url == source.file_url
    assert values.category == "tips"
    assert values.comments == "Revisar"
    # source left untouched
    assert source.status == "published"


def test_valid_form():
    form = ContentFormIn.model_validate(_payload(suggestedDate="2024-08-01", status="approved"))
    assert form.suggested_date == date(2024, 8, 1)
    assert form.file_url == "https://drive.google.com/file/d/abc/view"


@pytest.mark.parametrize(
    "override, field",
    [
        ({"title": ""}, "title"),
        ({"title": "   "}, "title"),
        ({"fileUrl": "not-a-url"}, "fileUrl"),
        ({"fileUrl": ""}, "fileUrl"),
        ({"category": ""}, "category"),
        ({"category": "memes"}, "category"),
        ({"status": "archived"}, "status"),
        ({"suggestedDate": "2024-02-30"}, "suggestedDate"),
    ],
)
def test_invalid_form_is_rejected_per_field(override, field):
    with pytest.raises(ValidationError) as exc:
        ContentFormIn.model_validate(_payload(**override))
    assert field in [err["loc"][0] for err in exc.value.errors()]


def test_blank_date_means_unscheduled():
    form = ContentFormIn.model_validate(_payload(suggestedDate=""))
    assert form.suggested_date is None
    assert to_document_values(form)["suggested_date"] is None


def test_document_values_serialize_date():
    form = ContentFormIn.model_validate(_payload(suggestedDate="2024-08-01", description="", comments="nota"))
    values = to_document_values(form)
    assert values["suggested_date"] == "2024-08-01"
    assert values["description"] is None
    assert values["comments"] == "nota"
    assert values["status"] == "draft"
