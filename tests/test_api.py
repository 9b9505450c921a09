"""Tests for the HTTP layer."""

from types import SimpleNamespace

import pytest

from docsplit.controllers.routes import split as split_routes
from docsplit.services.embedder import provider
from tests.fakes import FailingEmbedder


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_split_success(client):
    resp = client.post(
        "/split",
        json={"text": "A. B. C. D.", "config": {"splitterType": "RecursiveCharacterTextSplitter", "chunkSize": 5, "chunkOverlap": 0}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalChunks"] == 3
    assert all(c["metadata"]["length"] <= 5 for c in body["chunks"])
    assert body["statistics"]["maxChunkSize"] == 5


def test_validation_errors_are_listed(client):
    resp = client.post(
        "/split",
        json={"text": "hello", "config": {"splitterType": "CharacterTextSplitter", "chunkSize": 100, "chunkOverlap": 100}},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "INVALID_CONFIGURATION"
    assert "Chunk overlap must be less than chunk size" in body["details"]


def test_unknown_splitter_type(client):
    resp = client.post("/split", json={"text": "hello", "config": {"splitterType": "MagicSplitter"}})
    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_CONFIGURATION"


def test_chunk_size_above_limit(client):
    resp = client.post(
        "/split",
        json={"text": "hello", "config": {"splitterType": "RecursiveCharacterTextSplitter", "chunkSize": 50_000, "chunkOverlap": 0}},
    )
    assert resp.status_code == 400


def test_text_too_long(client):
    resp = client.post("/split", json={"text": "x" * 100_001, "config": {"splitterType": "RecursiveCharacterTextSplitter"}})
    assert resp.status_code == 400
    assert resp.json()["code"] == "TEXT_TOO_LONG"


def test_empty_text_is_rejected(client):
    resp = client.post("/split", json={"text": "", "config": {"splitterType": "RecursiveCharacterTextSplitter"}})
    assert resp.status_code == 400
    assert resp.json()["code"] == "TEXT_REQUIRED"


def test_missing_text_is_rejected(client):
    resp = client.post("/split", json={"config": {"splitterType": "RecursiveCharacterTextSplitter"}})
    assert resp.status_code == 400
    assert resp.json()["code"] == "TEXT_REQUIRED"


@pytest.mark.parametrize("config", [{}, None])
def test_configuration_is_required(client, config):
    resp = client.post("/split", json={"text": "hello", "config": config})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "INVALID_CONFIGURATION"
    assert body["message"] == "Configuration is required"


def test_semantic_without_openai_key_is_a_configuration_error(client, monkeypatch):
    monkeypatch.setattr(provider, "get_settings", lambda: SimpleNamespace(openai_api_key=""))
    resp = client.post(
        "/split",
        json={"text": "One. Two.", "config": {"splitterType": "SemanticChunker"}, "embeddingProfile": "openai_default"},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_CONFIGURATION"


def test_semantic_with_mock_profile(client):
    resp = client.post(
        "/split",
        json={
            "text": "The sun rose. Birds sang. Markets opened. Prices climbed. Night fell.",
            "config": {"splitterType": "SemanticChunker", "breakpointType": "standard_deviation"},
            "embeddingProfile": "mock",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalChunks"] >= 1
    assert all(c["content"].endswith(".") for c in body["chunks"])
    assert body["parameters"]["breakpointType"] == "standard_deviation"


def test_semantic_provider_failure_is_502(client, monkeypatch):
    monkeypatch.setattr(split_routes, "build_embedder", lambda _profile: FailingEmbedder("Incorrect API key provided"))
    resp = client.post(
        "/split",
        json={"text": "One. Two. Three.", "config": {"splitterType": "SemanticChunker"}},
    )
    assert resp.status_code == 502
    body = resp.json()
    assert body["code"] == "SPLIT_FAILED"
    assert "Incorrect API key provided" in body["message"]


def test_unknown_embedding_profile(client):
    resp = client.post(
        "/split",
        json={"text": "One. Two.", "config": {"splitterType": "SemanticChunker"}, "embeddingProfile": "missing"},
    )
    assert resp.status_code == 400


def test_source_metadata_round_trips(client):
    resp = client.post(
        "/split",
        json={
            "text": "alpha\n\nbeta",
            "config": {"splitterType": "CharacterTextSplitter", "chunkSize": 6, "chunkOverlap": 0},
            "source": {"fileName": "notes.txt"},
        },
    )
    assert resp.status_code == 200
    assert all(c["metadata"]["source"] == {"fileName": "notes.txt"} for c in resp.json()["chunks"])


def test_list_splitters(client):
    resp = client.get("/split/splitters")
    assert resp.status_code == 200
    entries = resp.json()
    assert len(entries) == 7
    by_type = {e["splitterType"]: e["defaults"] for e in entries}
    assert by_type["TokenTextSplitter"]["encodingName"] == "cl100k_base"
