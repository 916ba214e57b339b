"""Bill participant model"""
from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid

from splitbill.database import Base


class Participant(Base):
    """A person sharing a bill (not necessarily a registered user)"""

    __tablename__ = "participants"

    # Autoincrement id doubles as creation order
    id = Column(Integer, primary_key=True, autoincrement=True)
    bill_id = Column(Uuid(as_uuid=True), ForeignKey("bills.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Participant(id={self.id}, bill_id={self.bill_id}, name={self.name})>"
