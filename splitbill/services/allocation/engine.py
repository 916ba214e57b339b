"""Bill allocation engine"""

from decimal import Decimal
from typing import Dict, Optional, Sequence

from splitbill.services.allocation.adjustments import (resolve_discount,
                                                       resolve_surcharge)
from splitbill.services.allocation.base import BaseShareStrategy
from splitbill.services.allocation.equal_share import EqualShareStrategy
from splitbill.services.allocation.types import (AdjustmentPolicy,
                                                 AllocationResult,
                                                 BillSnapshot, EntityId,
                                                 ItemSnapshot, ItemSplits,
                                                 ParticipantSnapshot)
from splitbill.services.allocation.weighted_share import \
    WeightedShareStrategy
from splitbill.utils.decimal_utils import ZERO, sum_decimals


def get_share_strategy(
    weights: Optional[Dict[EntityId, Decimal]], participant_ids: Sequence[EntityId]
) -> BaseShareStrategy:
    """
    Pick how one item is divided.

    Weights naming someone outside the bill are dropped. If what remains
    sums to zero (or nothing was recorded) the item is divided equally.

    Args:
        weights: Recorded weights for the item, if any
        participant_ids: Every participant of the bill

    Returns:
        Instance of appropriate strategy
    """
    if weights:
        known = set(participant_ids)
        usable = {pid: weight for pid, weight in weights.items() if pid in known}
        if sum_decimals(usable.values()) > 0:
            return WeightedShareStrategy(usable)
    return EqualShareStrategy()


def allocate(
    participants: Sequence[ParticipantSnapshot],
    items: Sequence[ItemSnapshot],
    splits: Optional[ItemSplits] = None,
    policy: Optional[AdjustmentPolicy] = None,
) -> AllocationResult:
    """
    Divide a bill among its participants.

    Each item is shared by weight (or equally when no usable weights are
    recorded). Discount, tip and tax are then spread in proportion to each
    participant's share of the subtotal. Tip and tax percentages apply to
    the subtotal after discount.

    Pure function: no I/O, never raises for non-negative input, and the
    same input always yields the same result.

    Args:
        participants: People on the bill, in display order
        items: Bill lines
        splits: Item id -> {participant id: weight}
        policy: Discount, tip and tax settings

    Returns:
        AllocationResult with every participant present in the totals
    """
    splits = splits or {}
    policy = policy or AdjustmentPolicy()

    participant_ids = [participant.id for participant in participants]
    per_participant_subtotal = {pid: ZERO for pid in participant_ids}

    subtotal = ZERO
    for item in items:
        line_total = item.line_total
        subtotal += line_total

        strategy = get_share_strategy(splits.get(item.id), participant_ids)
        for share in strategy.calculate_shares(line_total, participant_ids):
            per_participant_subtotal[share.participant_id] += share.amount

    discount = resolve_discount(policy, subtotal)
    base = max(subtotal - discount, ZERO)
    tip = resolve_surcharge(policy.tip_amount, policy.tip_percent, base)
    tax = resolve_surcharge(policy.tax_amount, policy.tax_percent, base)

    per_participant_total = {}
    for pid in participant_ids:
        own_subtotal = per_participant_subtotal[pid]
        share = own_subtotal / subtotal if subtotal else ZERO
        per_participant_total[pid] = (
            (own_subtotal - discount * share) + tip * share + tax * share
        )

    return AllocationResult(
        subtotal=subtotal,
        discount=discount,
        base=base,
        tip=tip,
        tax=tax,
        total=base + tip + tax,
        per_participant_subtotal=per_participant_subtotal,
        per_participant_total=per_participant_total,
    )


def allocate_snapshot(snapshot: BillSnapshot) -> AllocationResult:
    """Run ``allocate`` on a fully loaded bill"""
    return allocate(
        snapshot.participants, snapshot.items, snapshot.splits, snapshot.policy
    )
