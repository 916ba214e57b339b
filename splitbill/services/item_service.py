"""Item and split business logic"""
import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.core.exceptions import NotFoundError, ValidationError
from splitbill.models.item import Item, ItemSplit
from splitbill.repositories.item_repository import ItemRepository
from splitbill.repositories.participant_repository import \
    ParticipantRepository
from splitbill.schemas.item import ItemCreate, ItemUpdate, SplitUpdate
from splitbill.services.bill_service import BillService

logger = logging.getLogger(__name__)


class ItemService:
    """Service for bill items and their split weights"""

    @staticmethod
    async def get_item(bill_id: UUID, item_id: int, user_id: UUID, db: AsyncSession) -> Item:
        """
        Get an item of a bill the user owns.

        Raises:
            NotFoundError: If bill or item not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        item = await ItemRepository.get_in_bill(db, bill.id, item_id)
        if not item:
            raise NotFoundError("Item not found")

        return item

    @staticmethod
    async def add_item(
        bill_id: UUID, item_data: ItemCreate, user_id: UUID, db: AsyncSession
    ) -> Item:
        """
        Add an item to a bill.

        Args:
            bill_id: Bill UUID
            item_data: Name, unit price and quantity
            user_id: Requesting user
            db: Database session

        Returns:
            Created item
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        item = Item(
            bill_id=bill.id,
            name=item_data.name,
            price=item_data.price,
            quantity=item_data.quantity,
        )
        created = await ItemRepository.create(db, item)
        await db.commit()
        return created

    @staticmethod
    async def list_items(bill_id: UUID, user_id: UUID, db: AsyncSession) -> List[Item]:
        bill = await BillService.get_owned_bill(bill_id, user_id, db)
        return await ItemRepository.get_by_bill(db, bill.id)

    @staticmethod
    async def update_item(
        bill_id: UUID, item_id: int, item_data: ItemUpdate, user_id: UUID, db: AsyncSession
    ) -> Item:
        """
        Change an item's name, price or quantity.

        Only the fields present in ``item_data`` are written.
        """
        item = await ItemService.get_item(bill_id, item_id, user_id, db)

        for field, value in item_data.model_dump(exclude_none=True).items():
            setattr(item, field, value)

        await db.commit()
        return item

    @staticmethod
    async def delete_item(
        bill_id: UUID, item_id: int, user_id: UUID, db: AsyncSession
    ) -> bool:
        item = await ItemService.get_item(bill_id, item_id, user_id, db)

        await ItemRepository.delete(db, item)
        await db.commit()
        return True

    @staticmethod
    async def get_splits(
        bill_id: UUID, item_id: int, user_id: UUID, db: AsyncSession
    ) -> List[ItemSplit]:
        item = await ItemService.get_item(bill_id, item_id, user_id, db)
        return await ItemRepository.get_splits(db, item.id)

    @staticmethod
    async def replace_splits(
        bill_id: UUID, item_id: int, split_data: SplitUpdate, user_id: UUID, db: AsyncSession
    ) -> List[ItemSplit]:
        """
        Replace the split weights of an item.

        Args:
            bill_id: Bill UUID
            item_id: Item ID
            split_data: Participant ID -> weight; empty clears the split
            user_id: Requesting user
            db: Database session

        Returns:
            The item's new split rows

        Raises:
            NotFoundError: If bill or item not found
            AuthorizationError: If user is not the owner
            ValidationError: If a weight names a participant outside the bill
        """
        item = await ItemService.get_item(bill_id, item_id, user_id, db)

        participants = await ParticipantRepository.get_by_bill(db, item.bill_id)
        known_ids = {p.id for p in participants}
        unknown = sorted(pid for pid in split_data.weights if pid not in known_ids)
        if unknown:
            raise ValidationError(
                f"Participants {unknown} are not part of this bill"
            )

        splits = await ItemRepository.replace_splits(db, item.id, split_data.weights)
        await db.commit()

        logger.debug("Item %s split among %d participants", item.id, len(splits))
        return splits
