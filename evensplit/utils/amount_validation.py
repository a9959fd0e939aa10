"""Contribution amount validation."""
import math
from decimal import Decimal
from typing import Any


class ContributionValidationError(ValueError):
    """Raised when a contribution amount cannot be accepted."""
    pass


def coerce_amount(value: Any) -> float:
    """
    Convert a contribution amount to a float.

    Rules:
    - int, float and Decimal are accepted as-is
    - strings are stripped and parsed as floats
    - None, booleans, empty or non-numeric strings are rejected
    - NaN and infinities are rejected
    - negative amounts are rejected
    """
    if value is None or isinstance(value, bool):
        raise ContributionValidationError(
            f"Contribution amount must be a number, got {value!r}"
        )

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ContributionValidationError("Contribution amount is empty")
        try:
            amount = float(text)
        except ValueError:
            raise ContributionValidationError(
                f"Contribution amount is not numeric: {value!r}"
            ) from None
    elif isinstance(value, (int, float, Decimal)):
        amount = float(value)
    else:
        raise ContributionValidationError(
            f"Contribution amount must be a number, got {type(value).__name__}"
        )

    if not math.isfinite(amount):
        raise ContributionValidationError(
            f"Contribution amount must be finite, got {value!r}"
        )

    if amount < 0:
        raise ContributionValidationError(
            f"Contribution amount must not be negative: {amount}"
        )

    return amount
