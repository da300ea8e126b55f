def test_create_and_list_tags_sorted_by_name(client, make_tag):
    make_tag("work")
    make_tag("health")

    resp = client.get("/api/tags")
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()] == ["health", "work"]


def test_create_tag_rejects_blank_name(client):
    resp = client.post("/api/tags", json={"name": "   "})
    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_TAG"


def test_create_tag_rejects_duplicate(client, make_tag):
    make_tag("work")

    resp = client.post("/api/tags", json={"name": "work"})
    assert resp.status_code == 409
    assert resp.json()["code"] == "TAG_EXISTS"


def test_delete_tag(client, make_tag):
    tag = make_tag("work")

    resp = client.delete(f"/api/tags/{tag['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": True, "id": tag["id"]}
    assert client.get("/api/tags").json() == []


def test_delete_missing_tag(client):
    resp = client.delete("/api/tags/42")
    assert resp.status_code == 404
    assert resp.json()["code"] == "TAG_NOT_FOUND"


def test_deleting_tag_drops_it_from_focus_modes(client, make_tag):
    work = make_tag("work")
    reading = make_tag("reading")
    created = client.post(
        "/api/focus-modes",
        json={"name": "Deep Work", "tags": [{"id": work["id"]}, {"id": reading["id"]}]},
    ).json()

    client.delete(f"/api/tags/{work['id']}")

    resp = client.get(f"/api/focus-modes/{created['focusId']}")
    assert resp.status_code == 200
    assert resp.json()["tags"] == [{"id": reading["id"], "name": "reading"}]


def test_cannot_delete_last_tag_of_focus_mode(client, make_tag):
    work = make_tag("work")
    created = client.post(
        "/api/focus-modes", json={"name": "Deep Work", "tags": [{"id": work["id"]}]}
    ).json()

    resp = client.delete(f"/api/tags/{work['id']}")
    assert resp.status_code == 409
    body = resp.json()
    assert body["code"] == "TAG_IN_USE"
    assert str(created["focusId"]) in body["message"]

    fetched = client.get(f"/api/focus-modes/{created['focusId']}").json()
    assert fetched["tags"] == [{"id": work["id"], "name": "work"}]
    assert [t["name"] for t in client.get("/api/tags").json()] == ["work"]


def test_tag_can_be_deleted_once_focus_mode_moves_off_it(client, make_tag):
    work = make_tag("work")
    music = make_tag("music")
    created = client.post(
        "/api/focus-modes", json={"name": "Deep Work", "tags": [{"id": work["id"]}]}
    ).json()
    client.put(
        "/api/focus-modes",
        json={"focusId": created["focusId"], "name": "Deep Work", "tags": [{"id": music["id"]}]},
    )

    resp = client.delete(f"/api/tags/{work['id']}")
    assert resp.status_code == 200


def test_delete_tag_rejects_out_of_range_id(client):
    resp = client.delete("/api/tags/99999999999999999999")
    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_REQUEST_BODY"
