"""Tests for the in-memory persistence adapter and path helpers."""

import pytest

from topmodel.adapters import AdapterResult, MemoryAdapter, PersistenceAdapter
from topmodel.exceptions import (
    DuplicateRecordError,
    MissingCollectionOrDataError,
    MissingIdError,
    RecordNotFoundError,
)
from topmodel.utils.paths import flatten, join_path, split_path


class TestMemoryAdapter:
    def test_is_a_persistence_adapter(self, memory_db):
        assert isinstance(memory_db, PersistenceAdapter)

    def test_create(self, memory_db):
        result = memory_db.create("users", {"firstname": "John"})

        assert isinstance(result, AdapterResult)
        assert result.data == {"_id": result.id, "firstname": "John"}
        assert memory_db.find("users", result.id) == result.data

    def test_create_keeps_given_id(self, memory_db):
        result = memory_db.create("users", {"_id": "abc", "firstname": "John"})
        assert result.id == "abc"

    def test_create_rejects_existing_id(self, memory_db):
        memory_db.create("users", {"_id": "abc", "firstname": "John", "lastname": "Doe"})
        with pytest.raises(DuplicateRecordError):
            memory_db.create("users", {"_id": "abc", "firstname": "Jane"})
        assert memory_db.find("users", "abc") == {"_id": "abc", "firstname": "John", "lastname": "Doe"}

    def test_same_id_in_other_collection(self, memory_db):
        memory_db.create("users", {"_id": "abc"})
        assert memory_db.create("admins", {"_id": "abc"}).id == "abc"

    def test_create_empty_record(self, memory_db):
        result = memory_db.create("users", {})
        assert result.data == {"_id": result.id}

    def test_update_with_empty_data(self, memory_db):
        created = memory_db.create("users", {"firstname": "John"})
        assert memory_db.update("users", {}, created.id).data == created.data

    @pytest.mark.parametrize("collection, data", [("", {"a": 1}), ("users", None), (None, {"a": 1})])
    def test_create_requires_collection_and_data(self, memory_db, collection, data):
        with pytest.raises(MissingCollectionOrDataError):
            memory_db.create(collection, data)

    def test_update_sets_nested_paths(self, memory_db):
        created = memory_db.create("users", {"firstname": "John", "job": {"title": "dev", "company": "ACME"}})
        result = memory_db.update("users", {"job": {"title": "lead"}}, created.id)

        assert result.data == {
            "_id": created.id,
            "firstname": "John",
            "job": {"title": "lead", "company": "ACME"},
        }

    def test_update_with_id_in_data(self, memory_db):
        created = memory_db.create("users", {"firstname": "John"})
        result = memory_db.update("users", {"_id": created.id, "firstname": "Jane"})
        assert result.data["firstname"] == "Jane"

    def test_update_requires_id(self, memory_db):
        with pytest.raises(MissingIdError):
            memory_db.update("users", {"firstname": "Jane"})

    def test_update_unknown_record(self, memory_db):
        with pytest.raises(RecordNotFoundError):
            memory_db.update("users", {"firstname": "Jane"}, "missing")

    def test_results_are_copies(self, memory_db):
        created = memory_db.create("users", {"tags": ["a"]})
        created.data["tags"].append("b")
        assert memory_db.find("users", created.id)["tags"] == ["a"]

    def test_clear(self, memory_db):
        created = memory_db.create("users", {"firstname": "John"})
        memory_db.clear()
        assert memory_db.find("users", created.id) is None


class TestPaths:
    def test_join_and_split(self):
        assert join_path("", "job") == "job"
        assert join_path("job", "title") == "job.title"
        assert split_path("job.title") == ("job", "title")

    def test_flatten(self):
        assert flatten({"id": 1, "job": {"title": "dev", "address": {"city": "Austin"}}, "tags": [], "meta": {}}) == {
            "id": 1,
            "job.title": "dev",
            "job.address.city": "Austin",
            "tags": [],
            "meta": {},
        }
