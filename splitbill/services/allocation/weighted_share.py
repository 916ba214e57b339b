"""Weighted share strategy"""

from decimal import Decimal
from typing import Dict, List, Sequence

from splitbill.services.allocation.base import BaseShareStrategy
from splitbill.services.allocation.types import EntityId, ParticipantShare
from splitbill.utils.decimal_utils import sum_decimals


class WeightedShareStrategy(BaseShareStrategy):
    """Participants pay in proportion to their recorded weights"""

    def __init__(self, weights: Dict[EntityId, Decimal]):
        total_weight = sum_decimals(weights.values())
        if total_weight <= 0:
            raise ValueError("Weighted split needs a positive total weight")
        self.weights = weights
        self.total_weight = total_weight

    def calculate_shares(
        self, line_total: Decimal, participant_ids: Sequence[EntityId]
    ) -> List[ParticipantShare]:
        """
        Calculate weight-proportional shares.

        Only participants named in the weights are charged, in bill order;
        everyone else pays nothing for this item.

        Args:
            line_total: unit price times quantity
            participant_ids: Every participant of the bill, in bill order

        Returns:
            List of ParticipantShare for weighted participants
        """
        shares = []
        for participant_id in participant_ids:
            weight = self.weights.get(participant_id)
            if weight is None:
                continue
            shares.append(
                ParticipantShare(
                    participant_id=participant_id,
                    amount=line_total * weight / self.total_weight,
                )
            )
        return shares
