"""Equal share strategy"""

from decimal import Decimal
from typing import List, Sequence

from splitbill.services.allocation.base import BaseShareStrategy
from splitbill.services.allocation.types import EntityId, ParticipantShare


class EqualShareStrategy(BaseShareStrategy):
    """Every participant pays the same part of the item"""

    def calculate_shares(
        self, line_total: Decimal, participant_ids: Sequence[EntityId]
    ) -> List[ParticipantShare]:
        num_participants = len(participant_ids)

        # Nobody to charge; the item still counts toward the subtotal
        if num_participants == 0:
            return []

        amount = line_total / num_participants
        return [
            ParticipantShare(participant_id=participant_id, amount=amount)
            for participant_id in participant_ids
        ]
