import logging
from typing import Optional

from pymongo import MongoClient

from evensplit.core.config import settings
from evensplit.db.store import BlobStore, FileBlobStore, MemoryBlobStore, MongoBlobStore
from evensplit.repositories.participant_repo import ParticipantRepository
from evensplit.services.ledger_service import Ledger

logger = logging.getLogger(__name__)


class LedgerSession:
    """Process-wide ledger and the store behind it."""

    client: Optional[MongoClient] = None
    store: Optional[BlobStore] = None
    ledger: Optional[Ledger] = None

ledger_session = LedgerSession()

def create_store() -> BlobStore:
    """Build the blob store selected by STORAGE_BACKEND."""
    backend = settings.STORAGE_BACKEND
    if backend == "memory":
        return MemoryBlobStore()
    if backend == "file":
        return FileBlobStore(settings.STORAGE_DIR)
    if backend == "mongo":
        ledger_session.client = MongoClient(settings.MONGODB_URL)
        collection = ledger_session.client[settings.DATABASE_NAME][settings.MONGODB_COLLECTION]
        return MongoBlobStore(collection)
    raise ValueError(f"Unknown storage backend: {backend!r}")

def open_ledger(store: Optional[BlobStore] = None) -> Ledger:
    """Load the ledger from storage and make it the session ledger."""
    ledger_session.store = store if store is not None else create_store()
    repo = ParticipantRepository(ledger_session.store)
    ledger_session.ledger = Ledger(load=repo.load, save=repo.save)
    logger.info("Ledger opened with %d participants", len(ledger_session.ledger))
    return ledger_session.ledger

def close_ledger():
    if ledger_session.client is not None:
        ledger_session.client.close()
    ledger_session.client = None
    ledger_session.store = None
    ledger_session.ledger = None
    logger.info("Ledger closed")

def get_ledger() -> Ledger:
    """Return the active ledger."""
    if ledger_session.ledger is None:
        raise RuntimeError("Ledger is not open")
    return ledger_session.ledger
