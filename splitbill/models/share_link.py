"""Share link model"""
from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid

from splitbill.database import Base


class ShareLink(Base):
    """Public read-only token for a bill"""

    __tablename__ = "share_links"

    token = Column(String(36), primary_key=True)
    bill_id = Column(Uuid(as_uuid=True), ForeignKey("bills.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<ShareLink(token={self.token}, bill_id={self.bill_id})>"
