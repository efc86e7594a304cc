"""NoteRepository tests against in-memory SQLite."""

import uuid

from sqlalchemy import func, select

from fesnotes.core.models import Share
from fesnotes.core.repositories import NoteRepository


async def test_create_defaults_color(test_session, make_user):
    alice = await make_user("alice")

    note = await NoteRepository(test_session).create_note(
        {"title": "T", "content": "C", "owner_id": alice.id}
    )

    assert note.color == "yellow"
    assert note.owner_id == alice.id
    assert note.created_at is not None


async def test_get_by_id(test_session, make_user, make_note):
    alice = await make_user("alice")
    note = await make_note(alice)
    repo = NoteRepository(test_session)

    assert (await repo.get_by_id(note.id)).title == "Title"
    assert await repo.get_by_id(uuid.uuid4()) is None


async def test_update_never_touches_owner(test_session, make_user, make_note):
    alice = await make_user("alice")
    bob = await make_user("bob")
    note = await make_note(alice)

    updated = await NoteRepository(test_session).update_note(
        note, {"title": "New", "owner_id": bob.id, "color": "pink"}
    )

    assert updated.title == "New"
    assert updated.color == "pink"
    assert updated.owner_id == alice.id


async def test_delete_note_cascades_grants(db, test_session, make_user, make_note, make_share):
    alice = await make_user("alice")
    bob = await make_user("bob")
    note = await make_note(alice)
    await make_share(note, bob)
    note_id = note.id

    assert await NoteRepository(test_session).delete_note(note_id)

    async with db.session_factory() as fresh:
        remaining = await fresh.scalar(
            select(func.count()).select_from(Share).where(Share.note_id == note_id)
        )
    assert remaining == 0


async def test_list_owned_search_is_case_insensitive_on_title_or_content(
    test_session, make_user, make_note
):
    alice = await make_user("alice")
    await make_note(alice, "Groceries", "milk and eggs")
    await make_note(alice, "Work", "Buy MILK for office")
    await make_note(alice, "Ideas", "nothing here")
    repo = NoteRepository(test_session)

    titles = sorted(n.title for n in await repo.list_owned_notes(alice.id, "milk"))
    assert titles == ["Groceries", "Work"]
    assert len(await repo.list_owned_notes(alice.id)) == 3


async def test_search_wildcards_are_literal(test_session, make_user, make_note):
    alice = await make_user("alice")
    await make_note(alice, "Progress", "100% done")
    await make_note(alice, "Other", "1000 done")
    await make_note(alice, "snake", "some_name")
    await make_note(alice, "plain", "somename")
    repo = NoteRepository(test_session)

    assert [n.title for n in await repo.list_owned_notes(alice.id, "0%")] == ["Progress"]
    assert [n.title for n in await repo.list_owned_notes(alice.id, "e_n")] == ["snake"]


async def test_list_shared_notes_carries_grant_and_owner(
    test_session, make_user, make_note, make_share
):
    alice = await make_user("alice")
    bob = await make_user("bob")
    shared = await make_note(alice, "Shared one", "hello")
    await make_note(alice, "Private", "hello")
    await make_share(shared, bob, "edit")

    rows = await NoteRepository(test_session).list_shared_notes(bob.id)

    assert len(rows) == 1
    note, share, owner_username = rows[0]
    assert note.id == shared.id
    assert share.permission == "edit"
    assert owner_username == "alice"

    assert await NoteRepository(test_session).list_shared_notes(bob.id, "nomatch") == []
