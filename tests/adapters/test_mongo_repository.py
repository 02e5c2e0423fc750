"""Tests for the MongoDB repositories, run against mongomock."""

from __future__ import annotations

from todoapp.adapters.mongo import MongoTagRepository, MongoTodoRepository
from todoapp.models import Tag, Todo


# ---------------------------------------------------------------------------
# ID sequence
# ---------------------------------------------------------------------------


class TestIdSequence:
    def test_ids_start_at_one_and_increase(self, mongo_tag_repository):
        first = mongo_tag_repository.save(Tag("work"))
        second = mongo_tag_repository.save(Tag("home"))

        assert (first.id, second.id) == (1, 2)
        assert mongo_tag_repository.next_id == 3

    def test_sequence_resumes_after_restart(self, mongo_database, mongo_tag_repository):
        mongo_tag_repository.save(Tag("work"))
        mongo_tag_repository.save(Tag("home"))

        restarted = MongoTagRepository(mongo_database)

        assert restarted.next_id == 3
        assert restarted.save(Tag("garden")).id == 3

    def test_collections_have_independent_sequences(
        self, mongo_todo_repository, mongo_tag_repository
    ):
        mongo_tag_repository.save(Tag("work"))
        mongo_tag_repository.save(Tag("home"))

        assert mongo_todo_repository.save(Todo("Buy milk")).id == 1

    def test_explicit_id_is_kept(self, mongo_tag_repository):
        tag = Tag("work")
        tag.id = 10

        mongo_tag_repository.save(tag)

        assert mongo_tag_repository.find_by_id(10).name == "work"
        assert mongo_tag_repository.next_id == 1

    def test_delete_all_resets_sequence(self, mongo_tag_repository):
        mongo_tag_repository.save(Tag("work"))
        mongo_tag_repository.save(Tag("home"))

        mongo_tag_repository.delete_all()

        assert mongo_tag_repository.find_all() == []
        assert mongo_tag_repository.save(Tag("again")).id == 1


# ---------------------------------------------------------------------------
# Todo repository
# ---------------------------------------------------------------------------


class TestMongoTodoRepository:
    def test_save_returns_same_instance(self, mongo_todo_repository):
        todo = Todo("Buy milk")

        assert mongo_todo_repository.save(todo) is todo

    def test_document_shape(self, mongo_database, mongo_todo_repository, mongo_tag_repository):
        tag = mongo_tag_repository.save(Tag("shopping"))
        todo = Todo("Buy milk")
        todo.add_tag(tag)

        mongo_todo_repository.save(todo)

        doc = mongo_database["todos"].find_one({"_id": todo.id})
        assert doc == {"_id": 1, "description": "Buy milk", "done": False, "tagIds": [1]}
        assert mongo_database["tags"].find_one({"_id": 1}) == {"_id": 1, "name": "shopping"}

    def test_round_trip_resolves_tags(self, mongo_todo_repository, mongo_tag_repository):
        tag = mongo_tag_repository.save(Tag("shopping"))
        todo = Todo("Buy milk", done=True)
        todo.add_tag(tag)
        mongo_todo_repository.save(todo)

        loaded = mongo_todo_repository.find_by_id(todo.id)

        assert loaded is not todo
        assert loaded == todo
        assert loaded.done is True
        assert [t.name for t in loaded.tags] == ["shopping"]

    def test_dangling_tag_ids_are_dropped(self, mongo_database, mongo_todo_repository, mongo_tag_repository):
        mongo_tag_repository.save(Tag("shopping"))
        mongo_database["todos"].insert_one(
            {"_id": 5, "description": "Buy milk", "done": False, "tagIds": [1, 99]}
        )

        loaded = mongo_todo_repository.find_by_id(5)

        assert {t.id for t in loaded.tags} == {1}

    def test_missing_optional_fields_default(self, mongo_database, mongo_todo_repository):
        mongo_database["todos"].insert_one({"_id": 1, "description": "Legacy"})

        loaded = mongo_todo_repository.find_by_id(1)

        assert loaded.done is False
        assert loaded.tags == set()

    def test_saving_twice_replaces_document(self, mongo_database, mongo_todo_repository):
        todo = mongo_todo_repository.save(Todo("Buy milk"))
        todo.done = True

        mongo_todo_repository.save(todo)

        assert mongo_database["todos"].count_documents({}) == 1
        assert mongo_todo_repository.find_by_id(todo.id).done is True

    def test_delete_and_unknown_delete(self, mongo_todo_repository):
        keep = mongo_todo_repository.save(Todo("Keep"))
        drop = mongo_todo_repository.save(Todo("Drop"))

        mongo_todo_repository.delete(drop)
        mongo_todo_repository.delete_by_id(999999)
        mongo_todo_repository.delete(Todo("Never saved"))

        assert mongo_todo_repository.find_all() == [keep]

    def test_find_by_done(self, mongo_todo_repository):
        mongo_todo_repository.save(Todo("Open"))
        mongo_todo_repository.save(Todo("Closed", done=True))

        assert [t.description for t in mongo_todo_repository.find_by_done(True)] == ["Closed"]

    def test_description_search_is_case_insensitive(self, mongo_todo_repository):
        for text in ("Buy milk", "buy eggs", "Walk dog"):
            mongo_todo_repository.save(Todo(text))

        found = mongo_todo_repository.find_by_description_containing("BUY")

        assert sorted(t.description for t in found) == ["Buy milk", "buy eggs"]

    def test_description_search_escapes_regex(self, mongo_todo_repository):
        mongo_todo_repository.save(Todo("abc"))
        mongo_todo_repository.save(Todo("a.c (draft)"))

        found = mongo_todo_repository.find_by_description_containing("a.c (")

        assert [t.description for t in found] == ["a.c (draft)"]

    def test_find_by_tag(self, mongo_todo_repository, mongo_tag_repository):
        work = mongo_tag_repository.save(Tag("work"))
        report = Todo("Write report")
        report.add_tag(work)
        mongo_todo_repository.save(report)
        mongo_todo_repository.save(Todo("Untagged"))

        assert mongo_todo_repository.find_by_tag(work) == [report]
        assert mongo_todo_repository.find_by_tag(Tag("unsaved")) == []


# ---------------------------------------------------------------------------
# Tag repository
# ---------------------------------------------------------------------------


class TestMongoTagRepository:
    def test_find_by_name(self, mongo_tag_repository):
        mongo_tag_repository.save(Tag("work"))

        assert mongo_tag_repository.find_by_name("work").id == 1
        assert mongo_tag_repository.find_by_name("Work") is None

    def test_find_by_name_containing(self, mongo_tag_repository):
        for name in ("Work", "homework", "garden"):
            mongo_tag_repository.save(Tag(name))

        found = mongo_tag_repository.find_by_name_containing("work")

        assert sorted(t.name for t in found) == ["Work", "homework"]


# ---------------------------------------------------------------------------
# Disconnected mode
# ---------------------------------------------------------------------------


class TestDisconnected:
    def test_reads_are_empty(self):
        tags = MongoTagRepository(None)
        todos = MongoTodoRepository(None, tags)

        assert not todos.is_connected
        assert todos.find_all() == []
        assert todos.find_by_id(1) is None
        assert todos.find_by_done(False) == []
        assert tags.find_by_name("work") is None

    def test_save_assigns_id_without_persisting(self):
        tags = MongoTagRepository(None)

        tag = tags.save(Tag("work"))

        assert tag.id == 1
        assert tags.find_all() == []

    def test_deletes_are_noops(self):
        tags = MongoTagRepository(None)

        tags.delete_by_id(1)
        tags.delete(Tag("work"))
        tags.delete_all()

        assert tags.next_id == 1
