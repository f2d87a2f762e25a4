"""Tests for note_manager.store and the Note model."""

import threading

import pytest
from pydantic import ValidationError

from note_manager.models import Note, NotFound
from note_manager.store import NoteStore


@pytest.fixture()
def store() -> NoteStore:
    """Return an empty NoteStore."""
    return NoteStore()


@pytest.fixture()
def populated(store: NoteStore) -> NoteStore:
    """Return a store holding three notes."""
    store.create("First", "one")
    store.create("Second", "two")
    store.create("Third", "three")
    return store


def _snapshot(store: NoteStore) -> list[dict]:
    return [n.model_dump() for n in store.get_all()]


class TestNoteModel:
    def test_fields_are_frozen(self) -> None:
        note = Note(id="abc", title="Title", content="")
        with pytest.raises(ValidationError):
            note.id = "other"
        with pytest.raises(ValidationError):
            note.title = "Changed"

    def test_timestamps_default(self) -> None:
        note = Note(id="abc", title="Title")
        assert note.content == ""
        assert note.created_at
        assert note.updated_at

    def test_not_found_is_falsy(self) -> None:
        missing = NotFound(note_id="nope")
        assert not missing
        assert missing.note_id == "nope"


class TestCreate:
    def test_create_appends_last(self, populated: NoteStore) -> None:
        before = populated.count
        note = populated.create("Fourth", "four")
        notes = populated.get_all()
        assert len(notes) == before + 1
        assert notes[-1] == note

    def test_create_then_find(self, store: NoteStore) -> None:
        note = store.create("My Title", "Hello")
        found = store.find_by_id(note.id)
        assert isinstance(found, Note)
        assert found.title == "My Title"
        assert found.content == "Hello"

    def test_create_does_not_validate(self, store: NoteStore) -> None:
        note = store.create("", "x" * 500)
        assert note in store.get_all()

    def test_ids_unique_over_many_creations(self, store: NoteStore) -> None:
        ids = {store.create("Title", "").id for _ in range(10_000)}
        assert len(ids) == 10_000
        assert store.count == 10_000

    def test_insertion_order_is_display_order(self, populated: NoteStore) -> None:
        assert [n.title for n in populated.get_all()] == ["First", "Second", "Third"]


class TestFindById:
    def test_missing_returns_not_found(self, populated: NoteStore) -> None:
        result = populated.find_by_id("does-not-exist")
        assert isinstance(result, NotFound)
        assert result.note_id == "does-not-exist"

    def test_contains(self, populated: NoteStore) -> None:
        note = populated.get_all()[0]
        assert note.id in populated
        assert "does-not-exist" not in populated
        assert 42 not in populated


class TestUpdate:
    def test_update_overwrites_fields(self, populated: NoteStore) -> None:
        target = populated.get_all()[1]
        order_before = [n.id for n in populated.get_all()]

        result = populated.update(target.id, "Renamed", "changed")

        assert isinstance(result, Note)
        found = populated.find_by_id(target.id)
        assert found.id == target.id
        assert found.title == "Renamed"
        assert found.content == "changed"
        assert found.created_at == target.created_at
        assert [n.id for n in populated.get_all()] == order_before

    def test_update_does_not_validate(self, populated: NoteStore) -> None:
        target = populated.get_all()[0]
        result = populated.update(target.id, "Hi", "")
        assert isinstance(result, Note)
        assert result.title == "Hi"

    def test_update_missing_leaves_collection_unchanged(
        self, populated: NoteStore
    ) -> None:
        before = _snapshot(populated)
        result = populated.update("does-not-exist", "New", "body")
        assert isinstance(result, NotFound)
        assert _snapshot(populated) == before

    def test_earlier_listing_is_not_mutated(self, populated: NoteStore) -> None:
        listing = populated.get_all()
        populated.update(listing[0].id, "Renamed", "")
        assert listing[0].title == "First"
        assert populated.get_all()[0].title == "Renamed"


class TestDelete:
    def test_delete_removes_only_target(self, populated: NoteStore) -> None:
        first, second, third = populated.get_all()

        result = populated.delete(second.id)

        assert result == second
        assert isinstance(populated.find_by_id(second.id), NotFound)
        assert populated.get_all() == [first, third]

    def test_delete_missing_leaves_collection_unchanged(
        self, populated: NoteStore
    ) -> None:
        before = _snapshot(populated)
        result = populated.delete("does-not-exist")
        assert isinstance(result, NotFound)
        assert _snapshot(populated) == before

    def test_delete_twice(self, populated: NoteStore) -> None:
        note = populated.get_all()[0]
        assert isinstance(populated.delete(note.id), Note)
        assert isinstance(populated.delete(note.id), NotFound)
        assert len(populated) == 2


class TestGetAll:
    def test_empty(self, store: NoteStore) -> None:
        assert store.get_all() == []
        assert len(store) == 0

    def test_returns_copy(self, populated: NoteStore) -> None:
        listing = populated.get_all()
        listing.clear()
        assert populated.count == 3

    def test_reflects_live_collection(self, populated: NoteStore) -> None:
        populated.create("Fourth", "")
        populated.delete(populated.get_all()[0].id)
        assert [n.title for n in populated.get_all()] == ["Second", "Third", "Fourth"]


class TestEndToEnd:
    def test_create_update_delete(self, store: NoteStore) -> None:
        note = store.create("My Title", "Hello")
        assert [(n.title, n.content) for n in store.get_all()] == [
            ("My Title", "Hello")
        ]

        store.update(note.id, "Hi", "")
        found = store.find_by_id(note.id)
        assert (found.title, found.content) == ("Hi", "")

        store.delete(note.id)
        assert store.get_all() == []


class TestConcurrency:
    def test_parallel_creates_and_deletes(self, store: NoteStore) -> None:
        keep = [store.create(f"Keep {i}", "") for i in range(50)]
        doomed = [store.create(f"Drop {i}", "") for i in range(200)]

        def create_many() -> None:
            for i in range(200):
                store.create(f"New {i}", "")

        def delete_many() -> None:
            for note in doomed:
                store.delete(note.id)

        threads = [threading.Thread(target=create_many) for _ in range(4)]
        threads.append(threading.Thread(target=delete_many))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        notes = store.get_all()
        assert len(notes) == 50 + 4 * 200
        assert len({n.id for n in notes}) == len(notes)
        assert notes[:50] == keep

    def test_delete_racing_update_on_same_id(self, store: NoteStore) -> None:
        bystander = store.create("Bystander", "")
        for i in range(200):
            note = store.create(f"Target {i}", "")
            barrier = threading.Barrier(2)
            results: dict[str, object] = {}

            def do_update() -> None:
                barrier.wait()
                results["update"] = store.update(note.id, "Updated", "body")

            def do_delete() -> None:
                barrier.wait()
                results["delete"] = store.delete(note.id)

            threads = [
                threading.Thread(target=do_update),
                threading.Thread(target=do_delete),
            ]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

            # the delete always wins the id; a lost update is a clean NotFound
            assert isinstance(results["delete"], Note)
            assert isinstance(results["update"], (Note, NotFound))
            assert note.id not in store
            assert store.get_all() == [bystander]
