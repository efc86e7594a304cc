"""Unit tests for access resolution and the owned/shared merge."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from fesnotes.core.access import (
    AccessLevel,
    AccessResolver,
    can_read,
    can_share,
    can_write,
    merge_visible_notes,
)
from fesnotes.core.errors import AuthorizationError, NotFoundError
from fesnotes.core.schemas.notes import NoteResponse

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_response(title, minutes, note_type="owner", permission="owner", updated_minutes=None):
    created = BASE + timedelta(minutes=minutes)
    return NoteResponse(
        id=uuid.uuid4(),
        title=title,
        content="c",
        color="yellow",
        owner_id=uuid.uuid4(),
        owner_username="someone",
        note_type=note_type,
        permission=permission,
        created_at=created,
        updated_at=BASE
        + timedelta(minutes=updated_minutes if updated_minutes is not None else minutes),
    )


@pytest.mark.parametrize(
    "access,read,write,share",
    [
        (AccessLevel.OWNER, True, True, True),
        (AccessLevel.EDIT, True, True, False),
        (AccessLevel.READ, True, False, False),
        (AccessLevel.NONE, False, False, False),
    ],
)
def test_predicates(access, read, write, share):
    assert can_read(access) is read
    assert can_write(access) is write
    assert can_share(access) is share


class TestMergeVisibleNotes:
    def test_interleaves_owned_and_shared_by_timestamp(self):
        a = make_response("A", 10)
        c = make_response("C", 30)
        b = make_response("B", 20, note_type="shared", permission="read")

        merged = merge_visible_notes([a, c], [b])

        assert [n.title for n in merged] == ["C", "B", "A"]

    def test_ascending(self):
        a = make_response("A", 10)
        b = make_response("B", 20, note_type="shared", permission="edit")

        merged = merge_visible_notes([a], [b], "created_at", "asc")

        assert [n.title for n in merged] == ["A", "B"]

    def test_title_sort_ignores_case(self):
        notes = [make_response("banana", 1), make_response("Apple", 2), make_response("cherry", 3)]

        merged = merge_visible_notes(notes, [], "title", "asc")

        assert [n.title for n in merged] == ["Apple", "banana", "cherry"]

    def test_updated_at_sort(self):
        old_but_edited = make_response("X", 1, updated_minutes=100)
        newer = make_response("Y", 50)

        merged = merge_visible_notes([newer], [old_but_edited], "updated_at", "desc")

        assert [n.title for n in merged] == ["X", "Y"]

    def test_inputs_are_not_modified(self):
        owned = (make_response("A", 1), make_response("B", 2))
        shared = (make_response("C", 3),)

        merge_visible_notes(owned, shared)

        assert [n.title for n in owned] == ["A", "B"]

    def test_empty(self):
        assert merge_visible_notes([], []) == []


class Dummy:
    def __init__(self, **kw):
        self.__dict__.update(kw)


class FakeNoteRepo:
    def __init__(self, notes):
        self.notes = {n.id: n for n in notes}

    async def get_by_id(self, note_id):
        return self.notes.get(note_id)


class FakeShareRepo:
    def __init__(self, grants):
        self.grants = grants

    async def get_permission(self, note_id, grantee_id):
        return self.grants.get((note_id, grantee_id))


class TestAccessResolver:
    @pytest.fixture
    def ids(self):
        return Dummy(
            owner=uuid.uuid4(), reader=uuid.uuid4(), editor=uuid.uuid4(), stranger=uuid.uuid4()
        )

    @pytest.fixture
    def resolver(self, ids):
        note = Dummy(id=uuid.uuid4(), owner_id=ids.owner)
        resolver = AccessResolver(session=None)
        resolver.note_repo = FakeNoteRepo([note])
        resolver.share_repo = FakeShareRepo(
            {(note.id, ids.reader): "read", (note.id, ids.editor): "edit"}
        )
        resolver.note = note
        return resolver

    async def test_resolve_levels(self, resolver, ids):
        note_id = resolver.note.id
        assert (await resolver.resolve_access(ids.owner, note_id))[1] == AccessLevel.OWNER
        assert (await resolver.resolve_access(ids.editor, note_id))[1] == AccessLevel.EDIT
        assert (await resolver.resolve_access(ids.reader, note_id))[1] == AccessLevel.READ
        assert (await resolver.resolve_access(ids.stranger, note_id))[1] == AccessLevel.NONE

    async def test_missing_note_is_none(self, resolver, ids):
        note, access = await resolver.resolve_access(ids.owner, uuid.uuid4())
        assert note is None
        assert access == AccessLevel.NONE

    async def test_require_hides_note_from_strangers(self, resolver, ids):
        with pytest.raises(NotFoundError):
            await resolver.require(ids.stranger, resolver.note.id, can_read, "read")

    async def test_require_missing_note_is_not_found(self, resolver, ids):
        with pytest.raises(NotFoundError):
            await resolver.require(ids.owner, uuid.uuid4(), can_read, "read")

    async def test_require_forbids_grantee_without_level(self, resolver, ids):
        with pytest.raises(AuthorizationError) as exc:
            await resolver.require(ids.reader, resolver.note.id, can_write, "edit")
        assert exc.value.status_code == 403

        with pytest.raises(AuthorizationError):
            await resolver.require(ids.editor, resolver.note.id, can_share, "share")

    async def test_require_returns_note_and_access(self, resolver, ids):
        note, access = await resolver.require(ids.editor, resolver.note.id, can_write, "edit")
        assert note is resolver.note
        assert access == AccessLevel.EDIT
