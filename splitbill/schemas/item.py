"""Item and split schemas"""

from decimal import Decimal
from typing import Annotated, Dict, List, Optional

from pydantic import (BaseModel, ConfigDict, Field, field_validator,
                      model_validator)

from splitbill.schemas.common import clean_name

MAX_QUANTITY = 1_000_000

Price = Annotated[Decimal, Field(ge=1, max_digits=12, decimal_places=2)]
Weight = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=4)]
Quantity = Annotated[int, Field(ge=1, le=MAX_QUANTITY)]


class ItemCreate(BaseModel):
    """Input schema for a bill item"""

    name: str = Field(..., max_length=255)
    price: Price
    quantity: Quantity = 1

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return clean_name(v)


class ItemUpdate(BaseModel):
    """Partial update of an item; at least one field is required"""

    name: Optional[str] = Field(default=None, max_length=255)
    price: Optional[Price] = None
    quantity: Optional[Quantity] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return clean_name(v)

    @model_validator(mode="after")
    def validate_has_changes(self) -> "ItemUpdate":
        if self.name is None and self.price is None and self.quantity is None:
            raise ValueError("No changes")
        return self


class ItemResponse(BaseModel):
    """Response schema for an item"""

    id: int
    name: str
    price: Decimal
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class ItemListResponse(BaseModel):
    """Items of a bill in creation order"""

    items: List[ItemResponse]


class SplitUpdate(BaseModel):
    """
    Participant weights for one item.

    Weights are relative: {A: 1, B: 3} charges A a quarter of the item.
    An empty mapping removes the split so the item is shared equally.
    """

    weights: Dict[int, Weight] = Field(default_factory=dict)


class SplitEntry(BaseModel):
    """One participant's recorded weight"""

    participant_id: int
    weight: Decimal

    model_config = ConfigDict(from_attributes=True)


class SplitListResponse(BaseModel):
    """Recorded weights of an item"""

    item_id: int
    splits: List[SplitEntry]
