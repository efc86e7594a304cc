"""Note CRUD and listing over HTTP."""

import pytest


async def create(client, headers, title, content="body", **extra):
    response = await client.post(
        "/api/notes", json={"title": title, "content": content, **extra}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["note"]


async def test_create_and_fetch(client, register):
    alice, user = await register("alice")

    note = await create(client, alice, "Groceries", "milk", color="green")
    response = await client.get(f"/api/notes/{note['id']}", headers=alice)

    assert response.status_code == 200
    fetched = response.json()["note"]
    assert fetched["color"] == "green"
    assert fetched["owner_id"] == user["id"]
    assert fetched["owner_username"] == "alice"
    assert (fetched["note_type"], fetched["permission"]) == ("owner", "owner")


async def test_put_without_color_keeps_it(client, register):
    alice, _ = await register("alice")
    note = await create(client, alice, "T", color="purple")

    response = await client.put(
        f"/api/notes/{note['id']}", json={"title": "T2", "content": "C2"}, headers=alice
    )

    assert response.status_code == 200
    assert response.json()["note"]["color"] == "purple"
    assert response.json()["note"]["title"] == "T2"


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "", "content": "c"},
        {"title": "t", "content": "   "},
        {"title": "t", "content": "c", "color": "red"},
        {"content": "c"},
    ],
)
async def test_invalid_note_payloads(client, register, payload):
    alice, _ = await register("alice")

    response = await client.post("/api/notes", json=payload, headers=alice)

    assert response.status_code == 400
    assert response.json()["details"]


async def test_visible_notes_union_with_search_and_sort(client, register):
    alice, _ = await register("alice")
    bob, _ = await register("bob")
    note_a = await create(client, alice, "Alpha", "trip PLAN")
    await create(client, alice, "Cooking", "pasta")
    note_b = await create(client, bob, "Beta plan", "shared with alice")
    await client.post(
        f"/api/notes/{note_b['id']}/share", json={"usernames": "alice"}, headers=bob
    )

    response = await client.get("/api/notes", params={"search": "plan"}, headers=alice)
    assert response.status_code == 200
    notes = response.json()["notes"]
    assert [(n["title"], n["note_type"]) for n in notes] == [
        ("Beta plan", "shared"),
        ("Alpha", "owner"),
    ]

    response = await client.get(
        "/api/notes", params={"search": "plan", "sort": "title", "order": "ASC"}, headers=alice
    )
    assert [n["id"] for n in response.json()["notes"]] == [note_a["id"], note_b["id"]]

    response = await client.get("/api/notes", headers=alice)
    assert len(response.json()["notes"]) == 3


@pytest.mark.parametrize("params", [{"sort": "owner_id"}, {"order": "sideways"}])
async def test_list_rejects_unknown_sort(client, register, params):
    alice, _ = await register("alice")

    response = await client.get("/api/notes", params=params, headers=alice)

    assert response.status_code == 400


async def test_shared_listing_accepts_search(client, register):
    alice, _ = await register("alice")
    bob, _ = await register("bob")
    for title in ("Budget", "Holiday"):
        note = await create(client, alice, title)
        await client.post(
            f"/api/notes/{note['id']}/share", json={"usernames": "bob"}, headers=alice
        )

    response = await client.get("/api/notes/shared", params={"search": "holi"}, headers=bob)

    assert [n["title"] for n in response.json()["notes"]] == ["Holiday"]


async def test_shared_note_fetch_by_grantee(client, register):
    alice, _ = await register("alice")
    bob, _ = await register("bob")
    note = await create(client, alice, "Secret")
    await client.post(
        f"/api/notes/{note['id']}/share",
        json={"usernames": "bob", "permission": "edit"},
        headers=alice,
    )

    response = await client.get(f"/api/notes/{note['id']}", headers=bob)

    assert response.status_code == 200
    assert response.json()["note"]["permission"] == "edit"
    assert response.json()["note"]["note_type"] == "shared"


async def test_unknown_note_is_not_found(client, register):
    alice, _ = await register("alice")

    response = await client.get("/api/notes/00000000-0000-0000-0000-000000000000", headers=alice)

    assert response.status_code == 404
    assert response.json() == {"error": "Note not found"}
