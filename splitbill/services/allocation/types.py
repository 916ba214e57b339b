"""Immutable inputs and outputs of the allocation engine"""

from decimal import Decimal
from typing import Dict, List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from splitbill.utils.decimal_utils import (round_decimal,
                                           round_preserving_total,
                                           sum_decimals, to_decimal)

# Identifiers are opaque to the engine
EntityId = Union[int, UUID, str]

ItemSplits = Dict[EntityId, Dict[EntityId, Decimal]]


class ParticipantSnapshot(BaseModel):
    """A person sharing the bill"""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    name: str = ""


class ItemSnapshot(BaseModel):
    """One line of the bill"""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    name: str = ""
    unit_price: Decimal = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)

    @field_validator("unit_price", mode="before")
    @classmethod
    def convert_unit_price(cls, v):
        """Convert numeric values to Decimal"""
        return to_decimal(v)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class AdjustmentPolicy(BaseModel):
    """
    Discount, tip and tax settings of a bill.

    Each adjustment has a percent and an absolute form; when both are set
    the absolute amount wins.
    """

    model_config = ConfigDict(frozen=True)

    discount_percent: Optional[Decimal] = Field(default=None, ge=0)
    discount_amount: Optional[Decimal] = Field(default=None, ge=0)
    tip_percent: Optional[Decimal] = Field(default=None, ge=0)
    tip_amount: Optional[Decimal] = Field(default=None, ge=0)
    tax_percent: Optional[Decimal] = Field(default=None, ge=0)
    tax_amount: Optional[Decimal] = Field(default=None, ge=0)

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
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal"""
        return to_decimal(v)


class BillSnapshot(BaseModel):
    """Everything the engine needs to price one bill"""

    model_config = ConfigDict(frozen=True)

    participants: List[ParticipantSnapshot] = Field(default_factory=list)
    items: List[ItemSnapshot] = Field(default_factory=list)
    splits: ItemSplits = Field(default_factory=dict)
    policy: AdjustmentPolicy = Field(default_factory=AdjustmentPolicy)


class ParticipantShare(BaseModel):
    """A participant's portion of one item"""

    participant_id: EntityId
    amount: Decimal


class AllocationResult(BaseModel):
    """Per-participant breakdown of a bill"""

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    discount: Decimal
    base: Decimal
    tip: Decimal
    tax: Decimal
    total: Decimal
    per_participant_subtotal: Dict[EntityId, Decimal]
    per_participant_total: Dict[EntityId, Decimal]

    def rounded(self, decimal_places: int = 2) -> "AllocationResult":
        """
        Round every figure to currency minor units.

        Per-participant totals are rounded so that they still add up to
        the rounded grand total. Missing minor units go to the
        participants with the largest fractional remainders, so each
        total moves by at most one unit.

        Args:
            decimal_places: Minor units of the currency (2 for cents, 0 for IDR)

        Returns:
            New result with rounded values
        """
        totals = self.per_participant_total
        target_total = self.total
        if not totals or self.subtotal == 0:
            target_total = sum_decimals(totals.values())

        subtotals = self.per_participant_subtotal
        return AllocationResult(
            subtotal=round_decimal(self.subtotal, decimal_places),
            discount=round_decimal(self.discount, decimal_places),
            base=round_decimal(self.base, decimal_places),
            tip=round_decimal(self.tip, decimal_places),
            tax=round_decimal(self.tax, decimal_places),
            total=round_decimal(self.total, decimal_places),
            per_participant_subtotal=round_preserving_total(
                subtotals, sum_decimals(subtotals.values()), decimal_places
            ),
            per_participant_total=round_preserving_total(
                totals, target_total, decimal_places
            ),
        )
