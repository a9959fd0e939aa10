from typing import List
from pydantic import BaseModel

from evensplit.models.participant import Participant
from evensplit.models.settlement import Balance, Transfer


class SummaryResponse(BaseModel):
    """Every derived view of the ledger at one point in time."""
    participants: List[Participant]
    total: float
    fair_share: float
    balances: List[Balance]
    transfers: List[Transfer]
