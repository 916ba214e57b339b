"""Bill schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from splitbill.schemas.common import PaginationMeta, blank_to_none
from splitbill.schemas.item import ItemResponse, SplitEntry
from splitbill.schemas.participant import ParticipantResponse

Amount = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
Percent = Annotated[Decimal, Field(ge=0, le=1000, max_digits=7, decimal_places=2)]
DiscountPercent = Annotated[Decimal, Field(ge=0, le=100, max_digits=5, decimal_places=2)]


class BillCreate(BaseModel):
    """Schema for creating a bill"""

    title: Optional[str] = Field(default=None, max_length=255)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        v = blank_to_none(v)
        return v.strip() if isinstance(v, str) else v


class AdjustmentUpdate(BaseModel):
    """
    Discount, tip and tax of a bill.

    Replaces all six policy fields; omitted or blank fields are cleared.
    When both forms of an adjustment are given the amount is used and the
    percent ignored.
    """

    discount_percent: Optional[DiscountPercent] = None
    discount_amount: Optional[Amount] = None
    tip_percent: Optional[Percent] = None
    tip_amount: Optional[Amount] = None
    tax_percent: Optional[Percent] = None
    tax_amount: Optional[Amount] = None

    @field_validator(
        "discount_percent",
        "discount_amount",
        "tip_percent",
        "tip_amount",
        "tax_percent",
        "tax_amount",
        mode="before",
    )
    @classmethod
    def convert_blank(cls, v):
        """Empty strings from forms mean 'not set'"""
        return blank_to_none(v)


class BillResponse(BaseModel):
    """Bill without its contents"""

    id: UUID
    title: str
    discount_percent: Optional[Decimal] = None
    discount_amount: Optional[Decimal] = None
    tip_percent: Optional[Decimal] = None
    tip_amount: Optional[Decimal] = None
    tax_percent: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    created_at: datetime
    updated_at: datetime
    saved_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ItemDetail(ItemResponse):
    """Item with its recorded split weights"""

    splits: List[SplitEntry] = []


class BillDetailResponse(BillResponse):
    """Bill with participants, items and splits"""

    participants: List[ParticipantResponse]
    items: List[ItemDetail]


class BillListItem(BaseModel):
    """Schema for a bill in the history list"""

    id: UUID
    title: str
    created_at: datetime
    saved_at: Optional[datetime] = None
    participants_count: int
    items_count: int
    subtotal: Decimal
    discount: Decimal
    tip: Decimal
    tax: Decimal
    total: Decimal


class BillListResponse(BaseModel):
    """Response schema for bill history"""

    items: List[BillListItem]
    pagination: PaginationMeta
