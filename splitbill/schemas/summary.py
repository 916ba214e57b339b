"""Summary and share schemas"""

from decimal import Decimal
from typing import Dict, List
from uuid import UUID

from pydantic import BaseModel

from splitbill.schemas.item import ItemResponse
from splitbill.schemas.participant import ParticipantResponse


class SummaryResponse(BaseModel):
    """
    Allocation of a bill.

    ``totals`` maps participant id to what that participant pays, after
    their proportional part of discount, tip and tax.
    """

    participants: List[ParticipantResponse]
    subtotal: Decimal
    discount: Decimal
    tip: Decimal
    tax: Decimal
    total: Decimal
    totals: Dict[int, Decimal]


class SharedBillResponse(SummaryResponse):
    """Public view of a shared bill"""

    bill_id: UUID
    title: str
    items: List[ItemResponse]


class ShareLinkResponse(BaseModel):
    """Created share link"""

    token: str
    path: str
