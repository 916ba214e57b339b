"""Bill model"""
import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Uuid, CheckConstraint
from sqlalchemy.orm import relationship

from splitbill.database import Base

POLICY_FIELDS = (
    "discount_percent",
    "discount_amount",
    "tip_percent",
    "tip_amount",
    "tax_percent",
    "tax_amount",
)


class Bill(Base):
    """A shared bill with its discount/tip/tax policy"""

    __tablename__ = "bills"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)

    # Adjustment policy; for each pair the amount wins over the percent
    discount_percent = Column(Numeric(7, 2), nullable=True)
    discount_amount = Column(Numeric(12, 2), nullable=True)
    tip_percent = Column(Numeric(7, 2), nullable=True)
    tip_amount = Column(Numeric(12, 2), nullable=True)
    tax_percent = Column(Numeric(7, 2), nullable=True)
    tax_amount = Column(Numeric(12, 2), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    saved_at = Column(DateTime, nullable=True)

    # Constraints
    __table_args__ = (
        CheckConstraint('discount_percent IS NULL OR discount_percent >= 0', name='check_discount_percent_non_negative'),
        CheckConstraint('discount_amount IS NULL OR discount_amount >= 0', name='check_discount_amount_non_negative'),
        CheckConstraint('tip_percent IS NULL OR tip_percent >= 0', name='check_tip_percent_non_negative'),
        CheckConstraint('tip_amount IS NULL OR tip_amount >= 0', name='check_tip_amount_non_negative'),
        CheckConstraint('tax_percent IS NULL OR tax_percent >= 0', name='check_tax_percent_non_negative'),
        CheckConstraint('tax_amount IS NULL OR tax_amount >= 0', name='check_tax_amount_non_negative'),
    )

    # Relationships
    owner = relationship("User", back_populates="bills")

    def __repr__(self) -> str:
        return f"<Bill(id={self.id}, title={self.title}, owner_id={self.owner_id})>"
