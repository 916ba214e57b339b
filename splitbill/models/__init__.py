"""SQLAlchemy models"""
from splitbill.models.user import User
from splitbill.models.bill import Bill
from splitbill.models.participant import Participant
from splitbill.models.item import Item, ItemSplit
from splitbill.models.share_link import ShareLink

__all__ = ["User", "Bill", "Participant", "Item", "ItemSplit", "ShareLink"]
