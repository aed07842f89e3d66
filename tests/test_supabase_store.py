"""Unit tests for the Supabase REST store, with HTTP mocked."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from job_board.integrations import SupabaseStore, create_store
from job_board.integrations.base import DataStoreError
from job_board.utils.config import Config


def fake_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.content = b"" if body is None else json.dumps(body).encode()
    response.json.return_value = body
    response.text = "" if body is None else json.dumps(body)
    return response


@pytest.fixture
def session():
    return requests.Session()


@pytest.fixture
def store(session):
    return SupabaseStore("https://demo.supabase.co/", "anon-key", session=session, timeout=5)


class TestSupabaseStore:
    def test_headers(self, store, session):
        assert session.headers["apikey"] == "anon-key"
        assert session.headers["Authorization"] == "Bearer anon-key"
        assert store.base_url == "https://demo.supabase.co/rest/v1"

    def test_access_token_used_for_bearer(self, session):
        SupabaseStore("https://demo.supabase.co", "anon-key", access_token="user-jwt", session=session)
        assert session.headers["Authorization"] == "Bearer user-jwt"

    def test_requires_url_and_key(self):
        with pytest.raises(ValueError):
            SupabaseStore("", "key")

    def test_select_builds_query(self, store, session):
        rows = [{"id": "j1", "status": "active"}]
        with patch.object(session, "request", return_value=fake_response(200, rows)) as request:
            result = store.select("jobs", filters={"status": "active"}, order_by="created_at", descending=True)

        assert result == rows
        method, url = request.call_args.args
        assert method == "GET"
        assert url == "https://demo.supabase.co/rest/v1/jobs"
        assert request.call_args.kwargs["params"] == {
            "select": "*",
            "status": "eq.active",
            "order": "created_at.desc",
        }
        assert request.call_args.kwargs["timeout"] == 5

    def test_null_filter(self, store, session):
        with patch.object(session, "request", return_value=fake_response(200, [])) as request:
            store.select("jobs", filters={"location": None})
        assert request.call_args.kwargs["params"]["location"] == "is.null"

    def test_get(self, store, session):
        with patch.object(session, "request", return_value=fake_response(200, [{"id": "u1"}])) as request:
            assert store.get("profiles", "u1") == {"id": "u1"}
        assert request.call_args.kwargs["params"]["id"] == "eq.u1"

    def test_insert_returns_representation(self, store, session):
        with patch.object(session, "request", return_value=fake_response(201, [{"id": "new", "title": "T"}])) as request:
            record = store.insert("jobs", {"title": "T"})

        assert record == {"id": "new", "title": "T"}
        assert request.call_args.args[0] == "POST"
        assert request.call_args.kwargs["json"] == {"title": "T"}
        assert request.call_args.kwargs["headers"] == {"Prefer": "return=representation"}

    def test_update_missing_row(self, store, session):
        with patch.object(session, "request", return_value=fake_response(200, [])) as request:
            assert store.update("jobs", "nope", {"status": "closed"}) is None
        assert request.call_args.args[0] == "PATCH"
        assert request.call_args.kwargs["params"] == {"id": "eq.nope"}

    def test_update_drops_id_from_body(self, store, session):
        with patch.object(session, "request", return_value=fake_response(200, [{"id": "j1"}])) as request:
            store.update("jobs", "j1", {"id": "j2", "status": "closed"})
        assert request.call_args.kwargs["json"] == {"status": "closed"}

    def test_delete(self, store, session):
        with patch.object(session, "request", return_value=fake_response(200, [{"id": "j1"}])):
            assert store.delete("jobs", "j1") is True
        with patch.object(session, "request", return_value=fake_response(200, [])):
            assert store.delete("jobs", "j1") is False

    def test_http_error_raises(self, store, session):
        error = fake_response(401, {"message": "JWT expired"})
        with patch.object(session, "request", return_value=error):
            with pytest.raises(DataStoreError, match="JWT expired"):
                store.select("jobs")

    def test_network_error_raises(self, store, session):
        with patch.object(session, "request", side_effect=requests.ConnectionError("down")):
            with pytest.raises(DataStoreError):
                store.select("jobs")

    def test_unknown_collection(self, store, session):
        with patch.object(session, "request") as request:
            with pytest.raises(DataStoreError):
                store.select("cvs")
        request.assert_not_called()


class TestCreateSupabaseStore:
    def test_from_config_and_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
        monkeypatch.setenv("SUPABASE_API_KEY", "env-key")
        config = Config(str(tmp_path / "config.json"))
        config.set("store.backend", "supabase")

        store = create_store(config)

        assert isinstance(store, SupabaseStore)
        assert store.base_url == "https://env.supabase.co/rest/v1"
        assert store.session.headers["apikey"] == "env-key"
