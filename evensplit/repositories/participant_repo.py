"""
ParticipantRepository - Loads and saves the participant list.

Storage format: a JSON array of
    {"id", "name", "total", "contributions": [{"id", "amount"}, ...]}
under a single key of a blob store. ``total`` is written for readers of the
raw blob but recomputed from contributions on load.
"""

import json
import logging
from typing import Any, Iterable, List, Optional, Set

from pydantic import ValidationError

from evensplit.core.config import settings
from evensplit.db.store import BlobStore
from evensplit.models.participant import Contribution, Participant, as_contribution_record

logger = logging.getLogger(__name__)


class ParticipantRepository:
    """Repository for the persisted participant list."""

    def __init__(self, store: BlobStore, key: Optional[str] = None):
        self.store = store
        self.key = key or settings.STORAGE_KEY

    def load(self) -> List[Participant]:
        """
        Read the participant list.

        Never raises for bad data:
        - missing key or unparseable blob -> empty list
        - contributions with an unusable amount are dropped
        - records that still fail validation or repeat an id are skipped
        """
        raw = self.store.get(self.key)
        if raw is None:
            return []

        try:
            records = json.loads(raw)
        except ValueError:
            logger.warning("Stored participant list under %r is not valid JSON, starting empty", self.key)
            return []

        if not isinstance(records, list):
            logger.warning("Stored participant list under %r is not a list, starting empty", self.key)
            return []

        participants: List[Participant] = []
        seen: Set[str] = set()
        for index, record in enumerate(records):
            try:
                participant = Participant.model_validate(self._drop_invalid_contributions(index, record))
            except ValidationError as exc:
                logger.warning("Skipping invalid participant record #%d: %s", index, exc.errors()[0]["msg"])
                continue

            if participant.id in seen:
                logger.warning("Skipping duplicate participant id %s", participant.id)
                continue

            seen.add(participant.id)
            participants.append(participant)

        logger.info("Loaded %d participants from %r", len(participants), self.key)
        return participants

    def save(self, participants: Iterable[Participant]) -> None:
        payload = [participant.model_dump(mode="json") for participant in participants]
        self.store.set(self.key, json.dumps(payload))

    @staticmethod
    def _drop_invalid_contributions(index: int, record: Any) -> Any:
        # Older data can hold null (NaN) or negative amounts; keep the participant
        if not isinstance(record, dict):
            return record

        cleaned = dict(record)
        for key in ("contributions", "expenses"):
            items = cleaned.get(key)
            if not isinstance(items, list):
                continue

            kept = []
            for item in items:
                try:
                    Contribution.model_validate(as_contribution_record(item))
                except ValidationError as exc:
                    logger.warning(
                        "Dropping invalid contribution of participant record #%d: %s",
                        index, exc.errors()[0]["msg"]
                    )
                    continue
                kept.append(item)
            cleaned[key] = kept

        return cleaned
