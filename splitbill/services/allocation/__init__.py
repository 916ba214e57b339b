"""Bill allocation engine"""

from splitbill.services.allocation.adjustments import (resolve_discount,
                                                       resolve_surcharge)
from splitbill.services.allocation.base import BaseShareStrategy
from splitbill.services.allocation.engine import (allocate, allocate_snapshot,
                                                  get_share_strategy)
from splitbill.services.allocation.equal_share import EqualShareStrategy
from splitbill.services.allocation.types import (AdjustmentPolicy,
                                                 AllocationResult,
                                                 BillSnapshot, EntityId,
                                                 ItemSnapshot, ItemSplits,
                                                 ParticipantShare,
                                                 ParticipantSnapshot)
from splitbill.services.allocation.weighted_share import \
    WeightedShareStrategy

__all__ = [
    "AdjustmentPolicy",
    "AllocationResult",
    "BaseShareStrategy",
    "BillSnapshot",
    "EntityId",
    "EqualShareStrategy",
    "ItemSnapshot",
    "ItemSplits",
    "ParticipantShare",
    "ParticipantSnapshot",
    "WeightedShareStrategy",
    "allocate",
    "allocate_snapshot",
    "get_share_strategy",
    "resolve_discount",
    "resolve_surcharge",
]
