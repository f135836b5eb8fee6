"""
Shared fixtures.

Database tests run against a throwaway SQLite file in tmp_path.
"""
import pytest

from core.fsrs import database


@pytest.fixture()
def vocab_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a fresh SQLite file and create the schema."""
    db_url = f"sqlite:///{tmp_path / 'vocab_db.sqlite'}"
    monkeypatch.setenv("DATABASE_URL", db_url)
    monkeypatch.delenv("TEST_MODE", raising=False)
    monkeypatch.delenv("DUE_CARD_LIMIT", raising=False)
    database.init_db()
    yield db_url
    database.dispose_engine()
