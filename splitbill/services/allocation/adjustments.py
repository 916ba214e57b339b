"""Discount, tip and tax resolution"""

from decimal import Decimal
from typing import Optional

from splitbill.services.allocation.types import AdjustmentPolicy
from splitbill.utils.decimal_utils import HUNDRED, ZERO


def percent_of(base: Decimal, percent: Decimal) -> Decimal:
    return base * percent / HUNDRED


def resolve_discount(policy: AdjustmentPolicy, subtotal: Decimal) -> Decimal:
    """
    Work out the discount for a subtotal.

    An absolute amount wins over a percentage. Either way the discount
    never exceeds the subtotal.

    Args:
        policy: Bill adjustment policy
        subtotal: Sum of all line totals

    Returns:
        Discount in currency units, between 0 and ``subtotal``
    """
    if policy.discount_amount is not None:
        return min(policy.discount_amount, subtotal)
    if policy.discount_percent is not None:
        return min(percent_of(subtotal, policy.discount_percent), subtotal)
    return ZERO


def resolve_surcharge(
    amount: Optional[Decimal], percent: Optional[Decimal], base: Decimal
) -> Decimal:
    """
    Work out a tip or tax.

    Args:
        amount: Absolute amount, if recorded
        percent: Percentage of ``base``, used only when ``amount`` is None
        base: Subtotal after discount

    Returns:
        Surcharge in currency units
    """
    if amount is not None:
        return amount
    if percent is not None:
        return percent_of(base, percent)
    return ZERO
