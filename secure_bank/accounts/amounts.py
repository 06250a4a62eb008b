"""
Amount conversion and rendering.

Notifications always show at least one decimal place: whole amounts
render as "200.0", fractional amounts drop trailing zeros ("200.5").
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from secure_bank.accounts.errors import InvalidAmountError

AmountLike = Union[Decimal, int, float, str]


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert a numeric input to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1").
    Sign is not checked here; that is the account's job.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError) as e:
            raise InvalidAmountError(f"Not a numeric amount: {value!r}") from e

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    if amount.is_zero():
        amount = abs(amount)
    return amount


def format_amount(amount: Decimal) -> str:
    """Render an amount for a notification message."""
    text = format(amount.normalize(), "f")
    if "." not in text:
        text += ".0"
    return text


def format_limit(limit: Decimal) -> str:
    """Render a policy limit without a forced decimal place ("500")."""
    return format(limit.normalize(), "f")
