"""Base strategy interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Sequence

from splitbill.services.allocation.types import EntityId, ParticipantShare


class BaseShareStrategy(ABC):
    """Base class for per-item share strategies"""

    @abstractmethod
    def calculate_shares(
        self, line_total: Decimal, participant_ids: Sequence[EntityId]
    ) -> List[ParticipantShare]:
        """
        Divide one item's line total among participants.

        Args:
            line_total: unit price times quantity
            participant_ids: Every participant of the bill, in bill order

        Returns:
            Shares for the participants that pay for this item; the amounts
            add up to ``line_total`` unless there are no participants
        """
        pass
