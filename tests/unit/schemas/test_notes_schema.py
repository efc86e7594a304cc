"""Unit tests for note schemas."""

from typing import get_args

import pytest
from pydantic import ValidationError

from fesnotes.core.models import DEFAULT_NOTE_COLOR, NOTE_COLORS
from fesnotes.core.schemas.notes import NoteColor, NoteCreate, NoteListQuery, NoteUpdate


class TestNoteCreate:
    def test_color_defaults_to_yellow(self):
        note = NoteCreate(title="T", content="C")
        assert note.color == "yellow"

    @pytest.mark.parametrize("color", ["yellow", "pink", "blue", "green", "purple", "orange"])
    def test_palette_colors_accepted(self, color):
        assert NoteCreate(title="T", content="C", color=color).color == color

    def test_unknown_color_rejected(self):
        with pytest.raises(ValidationError):
            NoteCreate(title="T", content="C", color="red")

    @pytest.mark.parametrize("field", ["title", "content"])
    def test_blank_fields_rejected(self, field):
        data = {"title": "T", "content": "C", field: "   "}
        with pytest.raises(ValidationError):
            NoteCreate(**data)

    def test_missing_content_rejected(self):
        with pytest.raises(ValidationError):
            NoteCreate(title="T")


def test_update_without_color_leaves_it_unset():
    assert NoteUpdate(title="T", content="C").color is None


class TestNoteListQuery:
    def test_defaults(self):
        query = NoteListQuery()
        assert (query.search, query.sort, query.order) == (None, "created_at", "desc")

    def test_order_is_case_insensitive(self):
        assert NoteListQuery(order="ASC").order == "asc"

    def test_blank_search_is_dropped(self):
        assert NoteListQuery(search="  ").search is None
        assert NoteListQuery(search=" milk ").search == "milk"

    def test_sort_whitelist(self):
        with pytest.raises(ValidationError):
            NoteListQuery(sort="owner_id")


def test_schema_palette_matches_model_palette():
    assert get_args(NoteColor) == NOTE_COLORS
    assert NoteCreate(title="T", content="C").color == DEFAULT_NOTE_COLOR
