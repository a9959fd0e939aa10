from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict


def new_object_id() -> str:
    """Fresh identifier: time-based ObjectId rendered as a hex string."""
    return str(ObjectId())


def coerce_id(value: Any) -> Any:
    # Older stored data used numeric millisecond timestamps as ids.
    if isinstance(value, (ObjectId, int)) and not isinstance(value, bool):
        return str(value)
    return value


class LedgerModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True
    )
