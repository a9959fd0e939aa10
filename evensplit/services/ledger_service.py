import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from evensplit.models.participant import Contribution, Participant
from evensplit.utils.amount_validation import coerce_amount

logger = logging.getLogger(__name__)

LoadParticipants = Callable[[], Iterable[Participant]]
SaveParticipants = Callable[[Sequence[Participant]], None]


def total_of_all(participants: Iterable[Participant]) -> float:
    """Sum of every participant's total."""
    total = 0.0
    for participant in participants:
        total += participant.total
    return total


def fair_share(participants: Sequence[Participant]) -> float:
    """Equal-split target per participant; 0 for an empty group."""
    if not participants:
        return 0.0
    return total_of_all(participants) / len(participants)


class Ledger:
    """
    Authoritative participant list for one session.

    The list is read once through ``load`` at construction and written back
    through ``save`` after every mutation. Unknown ids are ignored by the
    mutating operations.
    """

    def __init__(self, load: LoadParticipants, save: SaveParticipants):
        self._save = save
        self._participants: List[Participant] = list(load())

    @property
    def participants(self) -> Tuple[Participant, ...]:
        return tuple(p.model_copy(deep=True) for p in self._participants)

    def __len__(self) -> int:
        return len(self._participants)

    def _find(self, participant_id: str) -> Optional[Participant]:
        for participant in self._participants:
            if participant.id == participant_id:
                return participant
        return None

    def _persist(self) -> None:
        self._save(list(self._participants))

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        participant = self._find(participant_id)
        if participant is None:
            return None
        return participant.model_copy(deep=True)

    def add_participant(self, name: str) -> str:
        participant = Participant(name=name)
        # ObjectIds are unique per process; the check guards against ids loaded from storage
        while self._find(participant.id) is not None:
            participant = Participant(name=name)

        self._participants.append(participant)
        self._persist()
        logger.info("Added participant %s (%r)", participant.id, name)
        return participant.id

    def remove_participant(self, participant_id: str) -> None:
        participant = self._find(participant_id)
        if participant is None:
            logger.debug("Remove ignored, no participant %s", participant_id)
            return

        self._participants.remove(participant)
        self._persist()
        logger.info("Removed participant %s", participant_id)

    def record_contribution(self, participant_id: str, amount: Any) -> None:
        """
        Append a contribution to a participant.

        Unknown ids are ignored without looking at the amount. For a known
        id, raises ContributionValidationError unless the amount is a
        non-negative finite number.
        """
        participant = self._find(participant_id)
        if participant is None:
            logger.debug("Contribution ignored, no participant %s", participant_id)
            return

        value = coerce_amount(amount)

        participant.contributions.append(Contribution(amount=value))
        self._persist()
        logger.info("Recorded %.2f for participant %s", value, participant_id)

    def reset_all(self) -> None:
        self._participants = []
        self._persist()
        logger.info("Cleared all participants")

    def total_of_all(self) -> float:
        return total_of_all(self._participants)

    def fair_share(self) -> float:
        return fair_share(self._participants)
