"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from docsplit.main import app
from docsplit.services.splitting import tokenizer
from tests.fakes import WordEncoding


@pytest.fixture
def word_encoding(monkeypatch):
    """Install the word-level encoding as cl100k_base so token tests need no BPE download."""
    encoding = WordEncoding()
    monkeypatch.setitem(tokenizer._encodings, "cl100k_base", encoding)
    return encoding


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
