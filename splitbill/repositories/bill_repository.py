"""Bill data access"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete as sql_delete
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.bill import Bill
from splitbill.models.item import Item, ItemSplit
from splitbill.models.participant import Participant
from splitbill.models.share_link import ShareLink


class BillRepository:
    """Repository for Bill database operations"""

    @staticmethod
    async def create(db: AsyncSession, bill: Bill) -> Bill:
        """
        Create a new bill.

        Args:
            db: Database session
            bill: Bill object to create

        Returns:
            Created bill
        """
        db.add(bill)
        await db.flush()
        await db.refresh(bill)
        return bill

    @staticmethod
    async def get_by_id(db: AsyncSession, bill_id: UUID) -> Optional[Bill]:
        """
        Get bill by ID.

        Args:
            db: Database session
            bill_id: Bill UUID

        Returns:
            Bill if found, None otherwise
        """
        result = await db.execute(select(Bill).where(Bill.id == bill_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_owner_bills(
        db: AsyncSession, owner_id: UUID, skip: int = 0, limit: int = 20
    ) -> List[Bill]:
        """
        Get a page of a user's bills, newest first.

        Args:
            db: Database session
            owner_id: Owner UUID
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of bills
        """
        result = await db.execute(
            select(Bill)
            .where(Bill.owner_id == owner_id)
            .order_by(Bill.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def count_owner_bills(db: AsyncSession, owner_id: UUID) -> int:
        result = await db.execute(
            select(func.count(Bill.id)).where(Bill.owner_id == owner_id)
        )
        return result.scalar_one()

    @staticmethod
    async def clear_contents(db: AsyncSession, bill_id: UUID) -> None:
        """
        Delete every split, item and participant of a bill.

        Args:
            db: Database session
            bill_id: Bill UUID
        """
        item_ids = select(Item.id).where(Item.bill_id == bill_id)
        await db.execute(sql_delete(ItemSplit).where(ItemSplit.item_id.in_(item_ids)))
        await db.execute(sql_delete(Item).where(Item.bill_id == bill_id))
        await db.execute(sql_delete(Participant).where(Participant.bill_id == bill_id))
        await db.flush()

    @staticmethod
    async def delete(db: AsyncSession, bill: Bill) -> None:
        """
        Delete a bill together with its contents and share links.

        Args:
            db: Database session
            bill: Bill to delete
        """
        await BillRepository.clear_contents(db, bill.id)
        await db.execute(sql_delete(ShareLink).where(ShareLink.bill_id == bill.id))
        await db.delete(bill)
        await db.flush()
