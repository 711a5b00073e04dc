"""
HTTP tests for the leaderboard app using the packaged sample documents.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the spacegame package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from spacegame.app import create_app  # noqa: E402
from spacegame.core import config as core_config  # noqa: E402
from spacegame.repositories import LoadError  # noqa: E402


@pytest.fixture()
def app_env(monkeypatch):
    for name in ("APP_ENV", "SCORES_FILE", "PROFILES_FILE", "LEADERBOARD_PAGE_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(app_env):
    with TestClient(create_app()) as test_client:
        yield test_client


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_leaderboard_first_page(client):
    data = client.get("/api/leaderboard").json()
    assert data["page"] == 1
    assert data["pageSize"] == 10
    assert data["totalResults"] == 14
    assert data["pageCount"] == 2
    assert len(data["entries"]) == 10
    top = data["entries"][0]
    assert top["rank"] == 1
    assert top["score"] == {
        "id": "10",
        "profileId": "4",
        "score": 96320,
        "gameMode": "Trio",
        "gameRegion": "Andromeda",
    }
    assert top["profile"]["userName"] == "wilburk"
    assert "Solo" in data["gameModes"]
    assert "Messier 82" in data["gameRegions"]


def test_leaderboard_second_page_and_filters(client):
    data = client.get("/api/leaderboard", params={"page": 2}).json()
    assert [entry["rank"] for entry in data["entries"]] == [11, 12, 13, 14]

    data = client.get("/api/leaderboard", params={"mode": "Trio", "region": "Milky Way"}).json()
    assert data["totalResults"] == 1
    assert data["entries"][0]["score"]["id"] == "6"
    assert data["selectedMode"] == "Trio"


def test_page_size_comes_from_settings(app_env):
    app_env.setenv("LEADERBOARD_PAGE_SIZE", "3")
    core_config.get_settings.cache_clear()
    with TestClient(create_app()) as client:
        data = client.get("/api/leaderboard", params={"page": 5}).json()
    assert data["pageSize"] == 3
    assert [entry["score"]["id"] for entry in data["entries"]] == ["14", "9"]


def test_profile_lookup(client):
    resp = client.get("/api/profiles/2", params={"rank": 5})
    assert resp.status_code == 200
    data = resp.json()
    assert data["rank"] == 5
    assert data["profile"]["userName"] == "banant"


def test_unknown_profile_is_404(client):
    resp = client.get("/api/profiles/999")
    assert resp.status_code == 404


def test_index_page_renders_leaderboard(client):
    resp = client.get("/", params={"mode": "Duo"})
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "nexus" in resp.text
    assert "88412" in resp.text
    assert "96320" not in resp.text
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_index_page_with_no_matches(client):
    resp = client.get("/", params={"region": "Nowhere"})
    assert resp.status_code == 200
    assert "No scores match this filter." in resp.text


def test_malformed_scores_file_fails_app_creation(app_env, tmp_path):
    broken = tmp_path / "scores.json"
    broken.write_text("not json", encoding="utf-8")
    app_env.setenv("SCORES_FILE", str(broken))
    core_config.get_settings.cache_clear()
    with pytest.raises(LoadError):
        create_app()
