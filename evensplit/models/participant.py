"""
Participant model - one member of the group and everything they paid.

Invariants:
- total always equals the sum of contribution amounts, in recording order
- contributions are append-only
"""

from typing import Any, List

from pydantic import AliasChoices, Field, computed_field, field_validator

from evensplit.models.base import LedgerModel, new_object_id, coerce_id
from evensplit.utils.amount_validation import coerce_amount


def as_contribution_record(item: Any) -> Any:
    """Bare amounts in stored lists stand for contributions without an id."""
    if isinstance(item, (int, float, str)):
        return {"amount": item}
    return item


class Contribution(LedgerModel):
    """A single recorded payment."""
    id: str = Field(default_factory=new_object_id)
    amount: float

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return coerce_id(value)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value: Any) -> float:
        return coerce_amount(value)


class Participant(LedgerModel):
    id: str = Field(default_factory=new_object_id)
    name: str = ""
    contributions: List[Contribution] = Field(
        default_factory=list,
        validation_alias=AliasChoices("contributions", "expenses")
    )

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return coerce_id(value)

    @field_validator("contributions", mode="before")
    @classmethod
    def wrap_bare_amounts(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [as_contribution_record(item) for item in value]
        return value

    @computed_field
    @property
    def total(self) -> float:
        total = 0.0
        for contribution in self.contributions:
            total += contribution.amount
        return total
