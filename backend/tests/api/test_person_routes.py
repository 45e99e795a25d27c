"""Person Routes: CRUD behavior over an in-memory collection.

Invariants:
    - Create then read by id returns the stored fields
    - List returns every non-deleted document; an empty collection is 404
    - PUT overwrites all four fields (omitted ones become null)
    - Delete then read is 404; unknown ids are 404, malformed ids are 400
"""

from bson import ObjectId


async def test_create_returns_generated_identifier(client):
    res = await client.post(
        "/person",
        json={"FirstName": "Ann", "LastName": "Lee", "Email": "a@x.com", "Age": 30},
    )
    assert res.status_code == 200
    assert ObjectId.is_valid(res.json()["inserted_id"])


async def test_create_then_read_by_id(client, created_person):
    person_id, _ = created_person
    res = await client.get(f"/person/{person_id}")
    assert res.status_code == 200
    assert res.json() == [{
        "_id": person_id,
        "firstname": "Ann",
        "lastname": "Lee",
        "email": "a@x.com",
        "age": 30,
    }]


async def test_create_stores_lowercase_fields(client, mock_collection, created_person):
    person_id, _ = created_person
    stored = await mock_collection.find_one({"_id": ObjectId(person_id)})
    assert set(stored) == {"_id", "firstname", "lastname", "email", "age"}


async def test_list_returns_all_created(client):
    ids = []
    for name in ("Ann", "Bob", "Cid"):
        res = await client.post("/person", json={"firstname": name})
        ids.append(res.json()["inserted_id"])

    res = await client.get("/person")
    assert res.status_code == 200
    assert sorted(d["_id"] for d in res.json()) == sorted(ids)


async def test_list_with_trailing_slash(client, created_person):
    res = await client.get("/person/")
    assert res.status_code == 200
    assert len(res.json()) == 1


async def test_list_excludes_deleted(client):
    keep = (await client.post("/person", json={"firstname": "Keep"})).json()["inserted_id"]
    gone = (await client.post("/person", json={"firstname": "Gone"})).json()["inserted_id"]
    await client.delete(f"/person/{gone}")

    res = await client.get("/person")
    assert [d["_id"] for d in res.json()] == [keep]


async def test_list_empty_collection_is_404(client):
    res = await client.get("/person")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update_overwrites_all_fields(client, created_person):
    person_id, _ = created_person
    res = await client.put(f"/person/{person_id}", json={"FirstName": "Anna", "Age": 31})
    assert res.status_code == 200
    assert res.json() == {"matched_count": 1, "modified_count": 1, "upserted_id": None}

    doc = (await client.get(f"/person/{person_id}")).json()[0]
    assert doc["firstname"] == "Anna"
    assert doc["age"] == 31
    assert doc["lastname"] is None
    assert doc["email"] is None


async def test_update_unknown_id_reports_zero_matches(client):
    res = await client.put(f"/person/{ObjectId()}", json={"FirstName": "Nobody"})
    assert res.status_code == 200
    assert res.json()["matched_count"] == 0


async def test_delete_then_read_is_404(client, created_person):
    person_id, _ = created_person
    res = await client.delete(f"/person/{person_id}")
    assert res.status_code == 200
    assert res.json() == {"deleted_count": 1}

    res = await client.get(f"/person/{person_id}")
    assert res.status_code == 404


async def test_delete_unknown_id_reports_zero(client):
    res = await client.delete(f"/person/{ObjectId()}")
    assert res.status_code == 200
    assert res.json() == {"deleted_count": 0}


async def test_read_unknown_id_is_404_not_500(client, created_person):
    missing = str(ObjectId())
    res = await client.get(f"/person/{missing}")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["person_id"] == missing


async def test_malformed_id_rejected_on_every_route(client, created_person):
    for method in ("get", "delete"):
        res = await getattr(client, method)("/person/not-an-id")
        assert res.status_code == 400
        assert res.json()["error"]["code"] == "INVALID_IDENTIFIER"
    res = await client.put("/person/not-an-id", json={"FirstName": "X"})
    assert res.status_code == 400


async def test_malformed_id_does_not_touch_documents(client, created_person):
    person_id, _ = created_person
    await client.put("/person/123", json={"FirstName": "Overwritten"})
    await client.delete("/person/123")

    doc = (await client.get(f"/person/{person_id}")).json()[0]
    assert doc["firstname"] == "Ann"


async def test_unparseable_body_is_500_with_decoder_text(client):
    res = await client.post(
        "/person", content=b"{not json", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "PARSE_ERROR"
    assert error["message"].startswith("body")
    assert "property name" in error["message"]


async def test_wrong_field_type_is_500_naming_the_field(client):
    res = await client.post("/person", json={"Age": "thirty"})
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "PARSE_ERROR"
    assert "Age" in error["message"] or "age" in error["message"]


async def test_missing_body_is_500(client):
    res = await client.post("/person")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "PARSE_ERROR"


async def test_unparseable_update_body_leaves_document_untouched(client, created_person):
    person_id, _ = created_person
    res = await client.put(
        f"/person/{person_id}", content=b"[", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "PARSE_ERROR"

    doc = (await client.get(f"/person/{person_id}")).json()[0]
    assert doc["firstname"] == "Ann"
