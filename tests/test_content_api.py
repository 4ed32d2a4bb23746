"""Tests for the examples gallery and guides endpoints and their storage."""

import pytest
from fastapi.testclient import TestClient

from services.seed import SAMPLE_EXAMPLES, SAMPLE_GUIDES, seed_database
from services.shared.db import Database
from services.shared.schemas import GuideCreate
from services.storage import DatabaseStorage
from server.site_api import create_app


class TestExamplesEndpoints:

    def test_list_examples(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/examples")

        assert r.status_code == 200
        examples = r.json()
        assert len(examples) == len(SAMPLE_EXAMPLES)
        first = examples[0]
        assert first["id"] == 1
        assert first["title"] == SAMPLE_EXAMPLES[0].title
        assert {"projectType", "repositoryStructure", "generatedAgentsMd", "tags"} <= set(first)
        assert isinstance(first["tags"], list)

    def test_get_example(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/examples/2")
        assert r.status_code == 200
        assert r.json()["title"] == SAMPLE_EXAMPLES[1].title

    def test_unknown_example(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/examples/999")
        assert r.status_code == 404
        assert r.json() == {"message": "Example not found"}

    def test_non_numeric_id_is_not_found(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/examples/abc")
        assert r.status_code == 404

    def test_storage_failure(self, make_client, beginner_docs, monkeypatch):
        client = make_client(beginner_docs)

        def broken():
            raise RuntimeError("connection lost")

        monkeypatch.setattr(client.app.state.storage, "get_examples", broken)
        r = client.get("/api/examples")
        assert r.status_code == 500
        assert r.json() == {"message": "Failed to fetch examples"}

    def test_database_not_started(self, make_settings, beginner_docs):
        # No lifespan: the client is used without entering it
        client = TestClient(create_app(make_settings(beginner_docs)))
        r = client.get("/api/examples")
        assert r.status_code == 500
        assert r.json() == {"message": "Database not initialized"}


class TestGuidesEndpoints:

    def test_list_guides(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/guides")

        assert r.status_code == 200
        guides = r.json()
        assert [g["title"] for g in guides] == [g.title for g in SAMPLE_GUIDES]
        assert {"videoUrl", "thumbnailColor", "category"} <= set(guides[0])

    def test_get_guide(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/guides/3")
        assert r.status_code == 200
        assert r.json()["id"] == 3

    def test_unknown_guide(self, make_client, beginner_docs):
        r = make_client(beginner_docs).get("/api/guides/0")
        assert r.status_code == 404
        assert r.json() == {"message": "Guide not found"}

    def test_unseeded_database_is_empty(self, make_client, beginner_docs):
        client = make_client(beginner_docs, seed_database=False)
        assert client.get("/api/guides").json() == []
        assert client.get("/api/examples").json() == []


class TestDatabaseStorage:

    def _storage(self, make_settings, tmp_path):
        database = Database(make_settings(tmp_path).database)
        database.initialize()
        return database, DatabaseStorage(database.get_session_factory())

    def test_seed_runs_once(self, make_settings, tmp_path):
        database, storage = self._storage(make_settings, tmp_path)
        try:
            assert seed_database(storage) is True
            assert seed_database(storage) is False
            assert len(storage.get_examples()) == len(SAMPLE_EXAMPLES)
            assert len(storage.get_guides()) == len(SAMPLE_GUIDES)
        finally:
            database.close()

    def test_create_and_fetch_guide(self, make_settings, tmp_path):
        database, storage = self._storage(make_settings, tmp_path)
        try:
            created = storage.create_guide(GuideCreate(
                title="Writing Good Prompts",
                description="Short guide",
                thumbnailColor="bg-blue-500",
                category="basics",
            ))
            fetched = storage.get_guide(created.id)
            assert fetched == created
            assert fetched.video_url is None
        finally:
            database.close()

    def test_uninitialized_database(self, make_settings, tmp_path):
        database = Database(make_settings(tmp_path).database)
        with pytest.raises(RuntimeError, match="not initialized"):
            database.get_session_factory()
