"""Decimal arithmetic helpers"""

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Dict, Hashable, Iterable, Optional

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value) -> Optional[Decimal]:
    """
    Convert a stored or user-supplied number to Decimal, keeping None.

    Floats go through ``str`` so 0.1 stays 0.1.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_decimal(value: Decimal, decimal_places: int = 2) -> Decimal:
    """
    Round a decimal value to specified decimal places.

    Args:
        value: Decimal value to round
        decimal_places: Number of decimal places (default 2)

    Returns:
        Rounded decimal value
    """
    quantize_value = Decimal(10) ** -decimal_places
    return value.quantize(quantize_value, rounding=ROUND_HALF_UP)


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    """
    Sum decimal values.

    Args:
        values: Decimal values

    Returns:
        Sum of all values
    """
    return sum(values, ZERO)


def round_preserving_total(
    values: Dict[Hashable, Decimal], total: Decimal, decimal_places: int = 2
) -> Dict[Hashable, Decimal]:
    """
    Round every value so the results sum exactly to ``round_decimal(total)``.

    Largest-remainder method: every value is floored to the minor unit and
    the missing units go one each to the entries with the largest
    fractional remainders, ties to the first key in iteration order. For
    non-negative values summing to ``total`` each result stays within one
    minor unit of its unrounded value.

    Args:
        values: Unrounded amounts keyed by owner
        total: Unrounded grand total the amounts should add up to
        decimal_places: Number of decimal places

    Returns:
        New mapping with rounded amounts, same key order
    """
    if not values:
        return {}

    unit = Decimal(10) ** -decimal_places
    floored = {
        key: value.quantize(unit, rounding=ROUND_FLOOR) for key, value in values.items()
    }
    missing = (round_decimal(total, decimal_places) - sum_decimals(floored.values())) / unit
    per_entry, extra = divmod(int(missing), len(floored))

    # sorted() is stable, so equal remainders keep their input order
    by_remainder = sorted(floored, key=lambda key: values[key] - floored[key], reverse=True)
    bumped = set(by_remainder[:extra])

    return {
        key: amount + unit * (per_entry + (1 if key in bumped else 0))
        for key, amount in floored.items()
    }
