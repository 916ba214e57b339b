"""Bill business logic"""
import logging
from datetime import datetime
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.config import get_settings
from splitbill.core.exceptions import AuthorizationError, NotFoundError
from splitbill.models.bill import POLICY_FIELDS, Bill
from splitbill.repositories.bill_repository import BillRepository
from splitbill.schemas.bill import (AdjustmentUpdate, BillCreate,
                                    BillDetailResponse, BillListItem,
                                    BillResponse, ItemDetail)
from splitbill.schemas.item import ItemResponse, SplitEntry
from splitbill.schemas.participant import ParticipantResponse
from splitbill.schemas.summary import SummaryResponse
from splitbill.services.summary_service import SummaryService

logger = logging.getLogger(__name__)


class BillService:
    """Service for bill operations"""

    @staticmethod
    async def get_owned_bill(bill_id: UUID, user_id: UUID, db: AsyncSession) -> Bill:
        """
        Get a bill the user owns.

        Args:
            bill_id: Bill ID
            user_id: User ID requesting the bill
            db: Database session

        Returns:
            Bill

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillRepository.get_by_id(db, bill_id)

        if not bill:
            raise NotFoundError("Bill not found")

        if bill.owner_id != user_id:
            raise AuthorizationError("You are not the owner of this bill")

        return bill

    @staticmethod
    async def create_bill(bill_data: BillCreate, user_id: UUID, db: AsyncSession) -> Bill:
        """
        Create a new, empty bill.

        Args:
            bill_data: Bill creation data
            user_id: ID of user creating the bill
            db: Database session

        Returns:
            Created bill
        """
        bill = Bill(
            owner_id=user_id,
            title=bill_data.title or get_settings().default_bill_title,
        )
        created_bill = await BillRepository.create(db, bill)
        await db.commit()

        logger.info("Created bill %s for user %s", created_bill.id, user_id)
        return created_bill

    @staticmethod
    async def list_bills(
        user_id: UUID,
        db: AsyncSession,
        page: int = 1,
        page_size: int = 20,
    ) -> Tuple[List[BillListItem], int]:
        """
        Get a user's bill history with totals, newest first.

        Args:
            user_id: User ID
            db: Database session
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            Tuple of (history rows, total count)
        """
        skip = (page - 1) * page_size
        bills = await BillRepository.get_owner_bills(db, user_id, skip=skip, limit=page_size)
        total_count = await BillRepository.count_owner_bills(db, user_id)

        rows = []
        for bill in bills:
            snapshot = await SummaryService.load_snapshot(db, bill)
            result = SummaryService.allocate_rounded(snapshot)
            rows.append(
                BillListItem(
                    id=bill.id,
                    title=bill.title,
                    created_at=bill.created_at,
                    saved_at=bill.saved_at,
                    participants_count=len(snapshot.participants),
                    items_count=len(snapshot.items),
                    subtotal=result.subtotal,
                    discount=result.discount,
                    tip=result.tip,
                    tax=result.tax,
                    total=result.total,
                )
            )

        return rows, total_count

    @staticmethod
    async def get_bill_details(
        bill_id: UUID, user_id: UUID, db: AsyncSession
    ) -> BillDetailResponse:
        """
        Get a bill with participants, items and recorded splits.

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)
        participants, items, splits = await SummaryService.load_contents(db, bill)

        item_details = []
        for item in items:
            item_splits = splits.get(item.id, {})
            item_details.append(
                ItemDetail(
                    **ItemResponse.model_validate(item).model_dump(),
                    splits=[
                        SplitEntry(participant_id=pid, weight=weight)
                        for pid, weight in item_splits.items()
                    ],
                )
            )

        return BillDetailResponse(
            **BillResponse.model_validate(bill).model_dump(),
            participants=[ParticipantResponse.model_validate(p) for p in participants],
            items=item_details,
        )

    @staticmethod
    async def get_summary(bill_id: UUID, user_id: UUID, db: AsyncSession) -> SummaryResponse:
        """
        Allocate a bill among its participants.

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)
        return await SummaryService.build_summary(db, bill)

    @staticmethod
    async def update_adjustments(
        bill_id: UUID, adjustments: AdjustmentUpdate, user_id: UUID, db: AsyncSession
    ) -> Bill:
        """
        Replace the bill's discount, tip and tax settings.

        Every one of the six fields is written; fields left out are cleared.

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        for field in POLICY_FIELDS:
            setattr(bill, field, getattr(adjustments, field))

        await db.commit()
        return bill

    @staticmethod
    async def save_bill(bill_id: UUID, user_id: UUID, db: AsyncSession) -> Bill:
        """Mark a bill as saved by its owner"""
        bill = await BillService.get_owned_bill(bill_id, user_id, db)
        bill.saved_at = datetime.utcnow()
        await db.commit()
        return bill

    @staticmethod
    async def reset_bill(bill_id: UUID, user_id: UUID, db: AsyncSession) -> Bill:
        """
        Remove all participants, items and splits and clear the policy.

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        await BillRepository.clear_contents(db, bill.id)
        for field in POLICY_FIELDS:
            setattr(bill, field, None)

        await db.commit()
        logger.info("Reset bill %s", bill.id)
        return bill

    @staticmethod
    async def delete_bill(bill_id: UUID, user_id: UUID, db: AsyncSession) -> bool:
        """
        Delete a bill and everything attached to it (owner only).

        Returns:
            True if deleted

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        await BillRepository.delete(db, bill)
        await db.commit()

        logger.info("Deleted bill %s", bill_id)
        return True
