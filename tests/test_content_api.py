from sqlalchemy.exc import OperationalError

from app.services import content_store


def _form(**kw):
    data = {
        "title": "Tip: Optimiza tu SEO Local",
        "description": "Cinco pasos",
        "fileUrl": "https://drive.google.com/file/d/abc/view",
        "category": "tips",
        "suggestedDate": "2024-08-22",
        "status": "approved",
        "comments": "Revisar copy",
    }
    data.update(kw)
    return data


def _boom(*args, **kwargs):
    raise OperationalError("INSERT", {}, Exception("disk I/O error"))


def test_health(client):
    assert client.get("/").json() == {"status": "ok"}


def test_list_falls_back_to_examples(client):
    r = client.get("/content")
    assert r.status_code == 200
    body = r.json()
    assert body["source"] == "examples"
    assert body["total"] == 4
    assert [it["id"] for it in body["items"]] == ["example-4", "example-3", "example-1", "example-2"]
    card = body["items"][1]
    assert card["statusLabel"] == "Borrador"
    assert card["categoryLabel"] == "Tips"
    assert card["editUrl"] == "/dashboard/edit/example-3"
    assert card["duplicateUrl"] == "/dashboard/new?duplicateId=example-3"
    assert body["categories"][0] == {"value": "all", "label": "Todas las Categorías"}
    assert body["emptyMessage"] is None


def test_list_filters(client):
    body = client.get("/content", params={"category": "tips", "search": "seo"}).json()
    assert body["matched"] == 1
    assert body["items"][0]["title"] == "Tip: Optimiza tu SEO Local"

    body = client.get("/content", params={"date": "2024-08-15", "view": "list"}).json()
    assert [it["id"] for it in body["items"]] == ["example-1"]
    assert body["items"][0]["suggestedDateShort"] == "15/08/2024"

    body = client.get("/content", params={"status": "published", "category": "tips"}).json()
    assert body["items"] == []
    assert body["emptyMessage"] == "No se encontraron elementos que coincidan con sus filtros."


def test_list_rejects_bad_date(client):
    assert client.get("/content", params={"date": "2024-02-30"}).status_code == 422


def test_create_then_list_from_store(client):
    r = client.post("/content", json=_form())
    assert r.status_code == 201
    result = r.json()
    assert result["ok"] is True
    assert result["redirect"] == "/dashboard"

    body = client.get("/content", params={"view": "raw"}).json()
    assert body["source"] == "store"
    assert body["total"] == 1
    item = body["items"][0]
    assert item["id"] == result["id"]
    assert item["suggestedDate"] == "2024-08-22"
    assert item["createdAt"] is not None
    assert item["createdAt"] == item["updatedAt"]


def test_edit_flow(client):
    cid = client.post("/content", json=_form()).json()["id"]

    values = client.get(f"/content/{cid}/form").json()
    assert values["mode"] == "edit"
    assert values["id"] == cid
    assert values["fileUrl"] == "https://drive.google.com/file/d/abc/view"

    r = client.put(f"/content/{cid}", json=_form(title="Nuevo título", suggestedDate=None, status="published"))
    assert r.status_code == 200

    item = client.get(f"/content/{cid}").json()
    assert item["title"] == "Nuevo título"
    assert item["suggestedDate"] is None
    assert item["status"] == "published"
    assert item["updatedAt"] >= item["createdAt"]


def test_update_cannot_change_id(client):
    cid = client.post("/content", json=_form()).json()["id"]
    r = client.put(f"/content/{cid}", json=_form(id="other"))
    assert r.status_code == 400


def test_not_found(client):
    r = client.get("/content/missing")
    assert r.status_code == 404
    assert r.json()["detail"]["message"] == "Content item not found."
    assert client.get("/content/missing/form").status_code == 404
    assert client.put("/content/missing", json=_form()).status_code == 404


def test_duplicate_form(client):
    r = client.get("/content/form/new", params={"duplicateId": "example-3"})
    assert r.status_code == 200
    values = r.json()
    assert values["mode"] == "duplicate"
    assert values["id"] is None
    assert values["title"] == "Tip: Optimiza tu SEO Local (Copia)"
    assert values["status"] == "draft"
    assert values["suggestedDate"] is None
    assert values["fileUrl"] == "https://picsum.photos/seed/tip/400/300"


def test_new_form_defaults(client):
    values = client.get("/content/form/new").json()
    assert values["mode"] == "create"
    assert values["title"] == ""
    assert values["status"] == "draft"


def test_invalid_submission_never_reaches_store(client, monkeypatch):
    calls = []
    monkeypatch.setattr(content_store.ContentStore, "create_item", lambda self, values: calls.append(values))

    r = client.post("/content", json=_form(title=""))
    assert r.status_code == 422
    r = client.post("/content", json=_form(fileUrl="not-a-url"))
    assert r.status_code == 422
    assert [e["loc"][-1] for e in r.json()["detail"]] == ["fileUrl"]

    assert calls == []


def test_persistence_failure_keeps_form(client, monkeypatch):
    monkeypatch.setattr(content_store.ContentStore, "create_item", _boom)

    r = client.post("/content", json=_form())
    assert r.status_code == 500
    detail = r.json()["detail"]
    assert detail["message"] == "Failed to create content. Please try again."
    assert detail["form"]["title"] == "Tip: Optimiza tu SEO Local"
    assert detail["form"]["suggestedDate"] == "2024-08-22"


def test_store_unavailable_without_fallback(client, settings, monkeypatch):
    settings.use_example_fallback = False
    monkeypatch.setattr(content_store.ContentStore, "list_items", _boom)

    r = client.get("/content")
    assert r.status_code == 503
    assert r.json()["detail"]["retry"] is True


def test_categories_use_examples_when_empty(client, settings):
    settings.use_example_fallback = False
    body = client.get("/content").json()
    assert body["total"] == 0
    assert body["emptyMessage"] == "Aún no hay contenido para mostrar."

    labels = [o["label"] for o in client.get("/content/categories").json()]
    assert labels == ["Todas las Categorías", "Campañas", "Branding", "Promociones", "Tips"]


def test_example_items_cannot_be_edited(client):
    # readable and duplicable, but the edit form only serves stored items
    assert client.get("/content/example-3").status_code == 200
    r = client.get("/content/example-3/form")
    assert r.status_code == 404
    assert r.json()["detail"]["message"] == "Content item not found."


def test_update_failure_keeps_form(client, monkeypatch):
    cid = client.post("/content", json=_form()).json()["id"]
    monkeypatch.setattr(content_store.ContentStore, "update_item", _boom)

    r = client.put(f"/content/{cid}", json=_form(title="Cambio pendiente"))
    assert r.status_code == 500
    detail = r.json()["detail"]
    assert detail["message"] == "Failed to update content. Please try again."
    assert detail["form"]["title"] == "Cambio pendiente"
    assert detail["form"]["fileUrl"] == "https://drive.google.com/file/d/abc/view"
