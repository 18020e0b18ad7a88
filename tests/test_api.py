import json
from datetime import datetime

import pytest

from legal_catalog.core.exceptions import ConflictError, NotFoundError, ValidationError
from legal_catalog.main import ERROR_STATUS, catalog_error_handler

CATEGORY = {
    "name_id": "Hukum Pidana",
    "name_en": "Criminal Law",
    "description_id": None,
    "description_en": None,
}


def document_payload(category_id: int, **overrides) -> dict:
    payload = {
        "title_id": "Undang-Undang Pemberantasan Korupsi",
        "title_en": "Anti-Corruption Law",
        "content_id": "Pasal-pasal tentang pemberantasan korupsi",
        "content_en": "Articles on eradicating corruption",
        "summary_id": None,
        "summary_en": None,
        "document_type": "law",
        "category_id": category_id,
        "document_number": "UU No. 20 Tahun 2001",
        "publication_date": "2001-11-21T00:00:00",
        "effective_date": None,
        "tags": ["korupsi", "hukum"],
        "file_url": None,
        "is_published": True,
    }
    payload.update(overrides)
    return payload


async def create_category(client, **overrides) -> dict:
    response = await client.post("/categories/", json={**CATEGORY, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "timestamp" in response.json()


@pytest.mark.asyncio
async def test_catalog_scenario(client):
    category = await create_category(client)

    response = await client.post("/documents/", json=document_payload(category["id"]))
    assert response.status_code == 201, response.text
    document = response.json()
    assert document["created_at"] == document["updated_at"]

    found = (await client.post("/documents/search", json={"query": "korupsi", "language": "id"})).json()
    assert found["total_count"] == 1
    assert len(found["documents"]) == 1

    tagged = (await client.post("/documents/search", json={"tags": ["hukum"]})).json()
    assert tagged["total_count"] == 1

    blocked = await client.delete(f"/categories/{category['id']}")
    assert blocked.status_code == 409
    assert "1" in blocked.json()["detail"]

    deleted = await client.delete(f"/documents/{document['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"deleted": True}

    assert (await client.delete(f"/categories/{category['id']}")).status_code == 204
    assert (await client.get("/categories/")).json() == []


@pytest.mark.asyncio
async def test_update_category_only_given_field(client):
    category = await create_category(client, description_id="Deskripsi", description_en="Description")

    response = await client.put(f"/categories/{category['id']}", json={"name_en": "New Name"})

    assert response.status_code == 200
    body = response.json()
    assert body["name_en"] == "New Name"
    assert body["name_id"] == "Hukum Pidana"
    assert body["description_id"] == "Deskripsi"
    assert body["description_en"] == "Description"


@pytest.mark.asyncio
async def test_category_not_found_and_validation(client):
    assert (await client.get("/categories/999")).status_code == 404
    assert (await client.put("/categories/999", json={"name_en": "x"})).status_code == 404
    assert (await client.delete("/categories/999")).status_code == 404
    assert (await client.post("/categories/", json={**CATEGORY, "name_id": ""})).status_code == 422
    assert (await client.put("/categories/1", json={"name_id": None})).status_code == 422


@pytest.mark.asyncio
async def test_localized_categories(client):
    await create_category(client)

    response = await client.get("/categories/localized", params={"language": "en"})

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Criminal Law"


@pytest.mark.asyncio
async def test_create_document_with_unknown_category(client):
    response = await client.post("/documents/", json=document_payload(99999))

    assert response.status_code == 404
    search = (await client.post("/documents/search", json={"published_only": False})).json()
    assert search["total_count"] == 0


@pytest.mark.asyncio
async def test_get_document_in_both_languages(client):
    category = await create_category(client)
    created = (await client.post("/documents/", json=document_payload(category["id"]))).json()

    indonesian = (await client.get(f"/documents/{created['id']}")).json()
    english = (await client.get(f"/documents/{created['id']}", params={"language": "en"})).json()

    assert indonesian["title"] == created["title_id"]
    assert english["title"] == created["title_en"]
    assert english["category_name"] == "Criminal Law"
    assert (await client.get(f"/documents/{created['id']}", params={"language": "fr"})).status_code == 422
    assert (await client.get("/documents/424242")).status_code == 404


@pytest.mark.asyncio
async def test_update_document_refreshes_updated_at(client):
    category = await create_category(client)
    created = (await client.post("/documents/", json=document_payload(category["id"]))).json()

    response = await client.put(f"/documents/{created['id']}", json={"is_published": False, "summary_en": "Summary"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["is_published"] is False
    assert updated["summary_en"] == "Summary"
    assert updated["title_id"] == created["title_id"]
    assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(created["updated_at"])

    missing_category = await client.put(f"/documents/{created['id']}", json={"category_id": 99999})
    assert missing_category.status_code == 404
    assert (await client.put("/documents/99999", json={"title_en": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_document_is_not_an_error(client):
    response = await client.delete("/documents/99999")

    assert response.status_code == 200
    assert response.json() == {"deleted": False}


@pytest.mark.asyncio
async def test_browse_by_category_and_type(client):
    category = await create_category(client)
    await client.post("/documents/", json=document_payload(category["id"]))
    await client.post("/documents/", json=document_payload(
        category["id"], document_type="decision", is_published=False
    ))

    by_category = await client.get(f"/documents/by-category/{category['id']}", params={"language": "en"})
    by_type = await client.get("/documents/by-type/decision")

    assert by_category.status_code == 200
    assert [d["title"] for d in by_category.json()] == ["Anti-Corruption Law"]
    assert by_type.json() == []
    assert (await client.get("/documents/by-type/memo")).status_code == 422


@pytest.mark.asyncio
async def test_search_validation(client):
    assert (await client.post("/documents/search", json={"limit": 0})).status_code == 422
    assert (await client.post("/documents/search", json={"offset": -1})).status_code == 422
    assert (await client.post("/documents/search", json={"language": "de"})).status_code == 422


@pytest.mark.asyncio
async def test_domain_errors_map_to_status_codes():
    assert ERROR_STATUS == {ValidationError: 422, NotFoundError: 404, ConflictError: 409}

    response = await catalog_error_handler(None, ValidationError("tags cannot be null"))

    assert response.status_code == 422
    assert json.loads(response.body) == {"detail": "tags cannot be null"}
