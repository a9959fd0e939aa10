from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from evensplit.utils.amount_validation import coerce_amount


class ParticipantCreate(BaseModel):
    """Add a participant. Any name is accepted, including an empty one."""
    name: str = ""


class ContributionCreate(BaseModel):
    """Record a payment; numeric strings are parsed server-side."""
    amount: float

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value: Any) -> float:
        # Runs before pydantic's own float coercion so booleans are rejected
        return coerce_amount(value)


class ContributionResponse(BaseModel):
    id: str
    amount: float

    model_config = ConfigDict(from_attributes=True)


class ParticipantResponse(BaseModel):
    id: str
    name: str
    total: float
    contributions: List[ContributionResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
