"""Item and item split data access"""
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID
from sqlalchemy import select, delete as sql_delete
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.item import Item, ItemSplit


class ItemRepository:
    """Repository for Item and ItemSplit database operations"""

    @staticmethod
    async def create(db: AsyncSession, item: Item) -> Item:
        """
        Create a new item.

        Args:
            db: Database session
            item: Item object to create

        Returns:
            Created item
        """
        db.add(item)
        await db.flush()
        await db.refresh(item)
        return item

    @staticmethod
    async def get_by_bill(db: AsyncSession, bill_id: UUID) -> List[Item]:
        """
        Get all items of a bill in creation order.

        Args:
            db: Database session
            bill_id: Bill UUID

        Returns:
            List of items
        """
        result = await db.execute(
            select(Item).where(Item.bill_id == bill_id).order_by(Item.id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_in_bill(db: AsyncSession, bill_id: UUID, item_id: int) -> Optional[Item]:
        result = await db.execute(
            select(Item).where(Item.id == item_id, Item.bill_id == bill_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def delete(db: AsyncSession, item: Item) -> None:
        """
        Delete an item and its split weights.

        Args:
            db: Database session
            item: Item to delete
        """
        await db.execute(sql_delete(ItemSplit).where(ItemSplit.item_id == item.id))
        await db.delete(item)
        await db.flush()

    @staticmethod
    async def get_splits_for_bill(db: AsyncSession, bill_id: UUID) -> List[ItemSplit]:
        """
        Get every split row of a bill's items.

        Args:
            db: Database session
            bill_id: Bill UUID

        Returns:
            Split rows ordered by item, then participant creation order
        """
        result = await db.execute(
            select(ItemSplit)
            .join(Item, Item.id == ItemSplit.item_id)
            .where(Item.bill_id == bill_id)
            .order_by(ItemSplit.item_id, ItemSplit.participant_id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_splits(db: AsyncSession, item_id: int) -> List[ItemSplit]:
        result = await db.execute(
            select(ItemSplit)
            .where(ItemSplit.item_id == item_id)
            .order_by(ItemSplit.participant_id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def replace_splits(
        db: AsyncSession, item_id: int, weights: Dict[int, Decimal]
    ) -> List[ItemSplit]:
        """
        Replace an item's split weights.

        Args:
            db: Database session
            item_id: Item ID
            weights: Participant ID -> weight; empty clears the split

        Returns:
            The new split rows
        """
        await db.execute(sql_delete(ItemSplit).where(ItemSplit.item_id == item_id))
        splits = [
            ItemSplit(item_id=item_id, participant_id=participant_id, weight=weight)
            for participant_id, weight in weights.items()
        ]
        db.add_all(splits)
        await db.flush()
        return await ItemRepository.get_splits(db, item_id)
