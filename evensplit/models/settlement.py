from pydantic import Field

from evensplit.models.base import LedgerModel


class Balance(LedgerModel):
    """Where a participant stands against the equal split."""
    participant_id: str
    name: str
    total: float
    difference: float  # > 0 creditor, < 0 debtor

    @property
    def is_creditor(self) -> bool:
        return self.difference > 0

    @property
    def is_debtor(self) -> bool:
        return self.difference < 0


class Transfer(LedgerModel):
    """Debtor pays creditor amount."""
    from_name: str = Field(alias="from")
    to_name: str = Field(alias="to")
    amount: float
    from_id: str
    to_id: str
