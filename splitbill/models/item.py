"""Bill item and item split models"""
from datetime import datetime
from sqlalchemy import (CheckConstraint, Column, DateTime, ForeignKey, Integer,
                        Numeric, String, UniqueConstraint, Uuid)

from splitbill.database import Base


class Item(Base):
    """A line on the bill"""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bill_id = Column(Uuid(as_uuid=True), ForeignKey("bills.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Constraints
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint('quantity >= 1', name='check_quantity_positive'),
    )

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name}, price={self.price}, quantity={self.quantity})>"


class ItemSplit(Base):
    """Weight of one participant in one item"""

    __tablename__ = "item_splits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    participant_id = Column(Integer, ForeignKey("participants.id", ondelete="CASCADE"), nullable=False, index=True)
    weight = Column(Numeric(10, 4), nullable=False)

    # Constraints
    __table_args__ = (
        UniqueConstraint('item_id', 'participant_id', name='uq_item_participant'),
        CheckConstraint('weight >= 0', name='check_weight_non_negative'),
    )

    def __repr__(self) -> str:
        return f"<ItemSplit(item_id={self.item_id}, participant_id={self.participant_id}, weight={self.weight})>"
