import pytest
from fastapi.testclient import TestClient

from evensplit.core.config import settings
from evensplit.db.store import MemoryBlobStore
from evensplit.models.participant import Contribution, Participant
from evensplit.repositories.participant_repo import ParticipantRepository
from evensplit.services.ledger_service import Ledger


@pytest.fixture
def make_participants():
    """Build participants from (name, total) pairs, one contribution each."""
    def _make(*totals):
        return [
            Participant(name=name, contributions=[Contribution(amount=total)] if total else [])
            for name, total in totals
        ]
    return _make


@pytest.fixture
def memory_store():
    """Fresh in-memory blob store."""
    return MemoryBlobStore()


@pytest.fixture
def repo(memory_store):
    return ParticipantRepository(memory_store, key="users")


@pytest.fixture
def ledger(repo):
    """Empty ledger persisted to the in-memory store."""
    return Ledger(load=repo.load, save=repo.save)


@pytest.fixture
def test_client(monkeypatch):
    """Fixture for FastAPI test client backed by an in-memory store."""
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "memory")

    from evensplit.main import app

    # Use TestClient with context manager to trigger lifespan
    with TestClient(app) as client:
        yield client
