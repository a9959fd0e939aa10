"""
SettlementService - Turns equal-split balances into transfers.

Algorithm:
1. fair share = total of all contributions / participant count
2. difference = total - fair share for every participant
3. creditors (difference > 0) and debtors (difference < 0) keep ledger order;
   balanced participants are left out
4. walk both lists with one cursor each, moving min(creditor, debtor) per step
5. a step is emitted only when it moves more than the tolerance, and a cursor
   advances once its remaining amount drops below the tolerance

No sorting is done, so the transfer count is not guaranteed minimal.
"""

from typing import List, Optional, Sequence

from evensplit.core.config import settings
from evensplit.models.participant import Participant
from evensplit.models.settlement import Balance, Transfer
from evensplit.schemas.settlement import SummaryResponse
from evensplit.services.ledger_service import Ledger, fair_share, total_of_all


class _Open:
    __slots__ = ("participant_id", "name", "amount")

    def __init__(self, participant_id: str, name: str, amount: float):
        self.participant_id = participant_id
        self.name = name
        self.amount = amount


class SettlementService:
    @staticmethod
    def calculate_balances(participants: Sequence[Participant]) -> List[Balance]:
        share = fair_share(participants)
        return [
            Balance(
                participant_id=p.id,
                name=p.name,
                total=p.total,
                difference=p.total - share
            )
            for p in participants
        ]

    @staticmethod
    def calculate_settlements(
        participants: Sequence[Participant],
        tolerance: Optional[float] = None
    ) -> List[Transfer]:
        if tolerance is None:
            tolerance = settings.SETTLEMENT_TOLERANCE
        if tolerance < 0:
            raise ValueError(f"Settlement tolerance must not be negative: {tolerance}")

        creditors: List[_Open] = []
        debtors: List[_Open] = []

        for balance in SettlementService.calculate_balances(participants):
            if balance.difference > 0:
                creditors.append(_Open(balance.participant_id, balance.name, balance.difference))
            elif balance.difference < 0:
                debtors.append(_Open(balance.participant_id, balance.name, -balance.difference))

        transfers: List[Transfer] = []
        i = 0
        j = 0

        while i < len(creditors) and j < len(debtors):
            creditor = creditors[i]
            debtor = debtors[j]

            settlement = min(creditor.amount, debtor.amount)
            if settlement > tolerance:
                transfers.append(Transfer(
                    from_name=debtor.name,
                    to_name=creditor.name,
                    amount=settlement,
                    from_id=debtor.participant_id,
                    to_id=creditor.participant_id
                ))

            creditor.amount -= settlement
            debtor.amount -= settlement

            # One side always reaches zero here, so the loop makes progress
            # even when tolerance is 0
            if creditor.amount <= 0 or creditor.amount < tolerance:
                i += 1
            if debtor.amount <= 0 or debtor.amount < tolerance:
                j += 1

        return transfers

    @staticmethod
    def summarize(ledger: Ledger, tolerance: Optional[float] = None) -> SummaryResponse:
        participants = ledger.participants
        return SummaryResponse(
            participants=list(participants),
            total=total_of_all(participants),
            fair_share=fair_share(participants),
            balances=SettlementService.calculate_balances(participants),
            transfers=SettlementService.calculate_settlements(participants, tolerance)
        )
