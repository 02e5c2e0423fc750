"""Unit tests for the Todo and Tag entities."""

from __future__ import annotations

import pytest

from todoapp.models import Tag, Todo, ValidationError


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_new_todo_is_pending_without_id_or_tags(self):
        todo = Todo("Buy milk")

        assert todo.id is None
        assert todo.description == "Buy milk"
        assert todo.done is False
        assert todo.tags == set()

    def test_todo_can_start_done(self):
        assert Todo("Ship release", done=True).done is True

    def test_new_tag_has_no_id_or_todos(self):
        tag = Tag("work")

        assert tag.id is None
        assert tag.name == "work"
        assert tag.todos == set()

    def test_todo_rejects_none_description(self):
        with pytest.raises(ValidationError):
            Todo(None)

    def test_tag_rejects_none_name(self):
        with pytest.raises(ValidationError):
            Tag(None)

    def test_description_cannot_be_reset_to_none(self):
        todo = Todo("Buy milk")
        with pytest.raises(ValidationError):
            todo.description = None

    def test_empty_description_is_allowed_on_the_entity(self):
        assert Todo("").description == ""


# ---------------------------------------------------------------------------
# Equality and hashing
# ---------------------------------------------------------------------------


class TestEquality:
    def test_unsaved_entities_are_only_equal_to_themselves(self):
        a = Todo("Same")
        b = Todo("Same")

        assert a == a
        assert a != b
        assert hash(a) == hash(b)

    def test_entities_with_same_id_are_equal(self):
        a = Todo("First text")
        b = Todo("Other text")
        a.id = b.id = 7

        assert a == b
        assert b == a

    def test_entities_with_different_ids_are_not_equal(self):
        a = Tag("x")
        b = Tag("x")
        a.id, b.id = 1, 2

        assert a != b

    def test_one_missing_id_is_never_equal(self):
        a = Tag("x")
        b = Tag("x")
        a.id = 1

        assert a != b
        assert b != a

    def test_todo_never_equals_a_tag(self):
        todo = Todo("x")
        tag = Tag("x")
        todo.id = tag.id = 1

        assert todo != tag

    def test_hash_ignores_id(self):
        todo = Todo("Buy milk")
        before = hash(todo)
        todo.id = 42

        assert hash(todo) == before

    def test_entity_stays_findable_in_set_after_id_assignment(self):
        tag = Tag("home")
        bucket = {tag}
        tag.id = 3

        assert tag in bucket


# ---------------------------------------------------------------------------
# Relationship
# ---------------------------------------------------------------------------


class TestRelationship:
    def test_add_tag_updates_both_sides(self):
        todo = Todo("Buy milk")
        tag = Tag("shopping")

        todo.add_tag(tag)

        assert tag in todo.tags
        assert todo in tag.todos

    def test_remove_tag_updates_both_sides(self):
        todo = Todo("Buy milk")
        tag = Tag("shopping")
        todo.add_tag(tag)

        todo.remove_tag(tag)

        assert tag not in todo.tags
        assert todo not in tag.todos

    def test_remove_absent_tag_is_noop(self):
        todo = Todo("Buy milk")
        todo.remove_tag(Tag("never-added"))

        assert todo.tags == set()

    def test_adding_same_tag_twice_keeps_one(self):
        todo = Todo("Buy milk")
        tag = Tag("shopping")

        todo.add_tag(tag)
        todo.add_tag(tag)

        assert len(todo.tags) == 1

    def test_tags_property_returns_a_copy(self):
        todo = Todo("Buy milk")
        todo.add_tag(Tag("shopping"))

        copy = todo.tags
        copy.clear()

        assert len(todo.tags) == 1

    def test_todos_property_returns_a_copy(self):
        todo = Todo("Buy milk")
        tag = Tag("shopping")
        todo.add_tag(tag)

        tag.todos.clear()

        assert todo in tag.todos

    def test_setting_tags_to_none_clears_them(self):
        todo = Todo("Buy milk")
        todo.add_tag(Tag("shopping"))

        todo.tags = None

        assert todo.tags == set()

    def test_setting_tags_replaces_whole_set(self):
        todo = Todo("Buy milk")
        old = Tag("old")
        new = Tag("new")
        todo.add_tag(old)

        todo.tags = {new}

        assert todo.tags == {new}
        assert todo not in old.todos
        assert todo in new.todos

    def test_remove_matches_tag_by_id(self):
        """A separately loaded copy of the same tag detaches the original."""
        todo = Todo("Buy milk")
        original = Tag("shopping")
        original.id = 5
        todo.add_tag(original)
        copy = Tag("shopping")
        copy.id = 5

        todo.remove_tag(copy)

        assert todo.tags == set()


def test_repr_shows_key_fields():
    todo = Todo("Buy milk")
    todo.id = 1

    assert repr(todo) == "Todo(id=1, description='Buy milk', done=False)"
    assert repr(Tag("work")) == "Tag(id=None, name='work')"
