def _create(api_client, **overrides):
    body = {"owner": "지민", "birthday": "1999-03-14", "password": "secret"}
    body.update(overrides)
    response = api_client.post("/api/list", json=body)
    assert response.status_code == 200
    return response.json()["data"]


def test_create_returns_list_without_password(api_client):
    data = _create(api_client)

    assert data["id"]
    assert data["owner"] == "지민"
    assert data["birthday"] == "1999-03-14"
    assert data["items"] == []
    assert isinstance(data["createdAt"], int)
    assert "password" not in data


def test_create_requires_owner_and_birthday(api_client):
    response = api_client.post("/api/list", json={"owner": "지민"})

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Invalid request"

    blank = api_client.post("/api/list", json={"owner": "  ", "birthday": "1999-03-14"})
    assert blank.status_code == 422


def test_password_never_returned(api_client):
    list_id = _create(api_client)["id"]

    read = api_client.get(f"/api/list/{list_id}").json()
    patched = api_client.patch(f"/api/list/{list_id}", json={"owner": "민지"}).json()
    legacy = api_client.get("/api/wishlist", params={"id": list_id}).json()

    for body in (read, patched, legacy):
        assert body["success"] is True
        assert "password" not in body["data"]


def test_patch_preserves_id_and_unspecified_fields(api_client):
    created = _create(api_client)
    items = [
        {"id": "item-1", "title": "머그컵", "image": "", "price": "12900", "description": "", "siteName": "Naver Shopping", "url": "https://smartstore.naver.com/p/1"}
    ]

    response = api_client.patch(f"/api/list/{created['id']}", json={"id": "other", "items": items})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == created["id"]
    assert data["owner"] == created["owner"]
    assert data["birthday"] == created["birthday"]
    assert data["createdAt"] == created["createdAt"]
    assert data["items"][0]["siteName"] == "Naver Shopping"


def test_patch_rejects_duplicate_item_ids(api_client):
    list_id = _create(api_client)["id"]
    item = {"id": "dup", "title": "x", "url": "https://ohou.se/p/1"}

    response = api_client.patch(f"/api/list/{list_id}", json={"items": [item, item]})

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_missing_list_is_structured_404(api_client):
    for response in (
        api_client.get("/api/list/nope"),
        api_client.patch("/api/list/nope", json={"owner": "x"}),
        api_client.post("/api/list/nope/items", json={"url": "https://ohou.se/p/1"}),
    ):
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "List not found", "code": "not_found"}


def test_delete_nonexistent_list_succeeds(api_client):
    response = api_client.delete("/api/list/never-existed")

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_delete_then_read_is_404(api_client):
    list_id = _create(api_client)["id"]

    assert api_client.delete(f"/api/list/{list_id}").json()["success"] is True
    assert api_client.get(f"/api/list/{list_id}").status_code == 404


def test_add_and_remove_items(api_client):
    list_id = _create(api_client)["id"]

    first = api_client.post(f"/api/list/{list_id}/items", json={"title": "머그컵", "price": "12900", "url": "https://ohou.se/p/1"})
    second = api_client.post(f"/api/list/{list_id}/items", json={"title": "무드등", "price": "24900", "url": "https://ohou.se/p/2", "priority": 1})

    assert first.status_code == 200
    items = second.json()["data"]["items"]
    assert [item["title"] for item in items] == ["무드등", "머그컵"]
    assert items[0]["priority"] == 1

    removed = api_client.delete(f"/api/list/{list_id}/items/{items[1]['id']}")
    assert [item["title"] for item in removed.json()["data"]["items"]] == ["무드등"]


def test_verify_password(api_client):
    list_id = _create(api_client)["id"]

    ok = api_client.post(f"/api/list/{list_id}/verify", json={"password": "secret"}).json()
    bad = api_client.post(f"/api/list/{list_id}/verify", json={"password": "guess"}).json()

    assert ok == {"success": True, "data": True, "error": None}
    assert bad["success"] is False
    assert bad["data"] is False


def test_legacy_save_and_load(api_client):
    saved = api_client.post("/api/wishlist", json={"owner": "지민", "birthday": "1999-03-14", "items": [], "createdAt": 1700000000000})
    list_id = saved.json()["data"]["id"]

    loaded = api_client.get("/api/wishlist", params={"id": list_id}).json()
    assert loaded["data"]["createdAt"] == 1700000000000

    # the legacy store and the list API share records
    assert api_client.get(f"/api/list/{list_id}").json()["data"]["owner"] == "지민"


def test_legacy_load_requires_id(api_client):
    response = api_client.get("/api/wishlist")

    assert response.status_code == 400
    assert response.json()["error"] == "ID missing"


def test_patch_rejects_null_and_blank_required_fields(api_client):
    created = _create(api_client)
    list_id = created["id"]

    for body in ({"owner": None}, {"birthday": None}, {"items": None}, {"owner": "  "}, {"birthday": ""}):
        response = api_client.patch(f"/api/list/{list_id}", json=body)
        assert response.status_code == 422, body
        assert response.json()["success"] is False
        assert response.json()["code"] == "validation_error"

    stored = api_client.get(f"/api/list/{list_id}").json()["data"]
    assert stored["owner"] == created["owner"]
    assert stored["birthday"] == created["birthday"]


def test_patch_strips_owner(api_client):
    list_id = _create(api_client)["id"]

    response = api_client.patch(f"/api/list/{list_id}", json={"owner": "  민지 "})

    assert response.status_code == 200
    assert response.json()["data"]["owner"] == "민지"


def test_legacy_save_rejects_duplicate_item_ids(api_client):
    item = {"id": "dup", "title": "x", "url": "https://ohou.se/p/1"}

    response = api_client.post("/api/wishlist", json={"owner": "지민", "birthday": "1999-03-14", "items": [item, item]})

    assert response.status_code == 422
    assert response.json()["success"] is False
    assert response.json()["code"] == "validation_error"
