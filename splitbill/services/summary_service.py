"""Bill snapshot loading and allocation summaries"""

from decimal import Decimal
from typing import Dict, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.config import get_settings
from splitbill.models.bill import POLICY_FIELDS, Bill
from splitbill.models.item import Item
from splitbill.models.participant import Participant
from splitbill.repositories.item_repository import ItemRepository
from splitbill.repositories.participant_repository import \
    ParticipantRepository
from splitbill.schemas.participant import ParticipantResponse
from splitbill.schemas.summary import SummaryResponse
from splitbill.services.allocation import (AdjustmentPolicy, AllocationResult,
                                           BillSnapshot, ItemSnapshot,
                                           ParticipantSnapshot,
                                           allocate_snapshot)


class SummaryService:
    """Every endpoint that shows money goes through this service"""

    @staticmethod
    def policy_from_bill(bill: Bill) -> AdjustmentPolicy:
        return AdjustmentPolicy(**{field: getattr(bill, field) for field in POLICY_FIELDS})

    @staticmethod
    async def load_contents(
        db: AsyncSession, bill: Bill
    ) -> Tuple[List[Participant], List[Item], Dict[int, Dict[int, Decimal]]]:
        """
        Load a bill's participants, items and split weights.

        Args:
            db: Database session
            bill: Bill to load

        Returns:
            Tuple of (participants, items, item id -> {participant id: weight})
        """
        participants = await ParticipantRepository.get_by_bill(db, bill.id)
        items = await ItemRepository.get_by_bill(db, bill.id)

        splits: Dict[int, Dict[int, Decimal]] = {}
        for split in await ItemRepository.get_splits_for_bill(db, bill.id):
            splits.setdefault(split.item_id, {})[split.participant_id] = split.weight

        return participants, items, splits

    @staticmethod
    def build_snapshot(
        bill: Bill,
        participants: List[Participant],
        items: List[Item],
        splits: Dict[int, Dict[int, Decimal]],
    ) -> BillSnapshot:
        return BillSnapshot(
            participants=[
                ParticipantSnapshot(id=p.id, name=p.name) for p in participants
            ],
            items=[
                ItemSnapshot(id=i.id, name=i.name, unit_price=i.price, quantity=i.quantity)
                for i in items
            ],
            splits=splits,
            policy=SummaryService.policy_from_bill(bill),
        )

    @staticmethod
    async def load_snapshot(db: AsyncSession, bill: Bill) -> BillSnapshot:
        """
        Load everything the allocation engine needs for one bill.

        Args:
            db: Database session
            bill: Bill already checked for access

        Returns:
            Immutable snapshot of the bill
        """
        participants, items, splits = await SummaryService.load_contents(db, bill)
        return SummaryService.build_snapshot(bill, participants, items, splits)

    @staticmethod
    def allocate_rounded(snapshot: BillSnapshot) -> AllocationResult:
        """Allocate and round to the configured currency minor units"""
        places = get_settings().currency_decimal_places
        return allocate_snapshot(snapshot).rounded(places)

    @staticmethod
    def to_response(snapshot: BillSnapshot, result: AllocationResult) -> SummaryResponse:
        return SummaryResponse(
            participants=[
                ParticipantResponse(id=p.id, name=p.name) for p in snapshot.participants
            ],
            subtotal=result.subtotal,
            discount=result.discount,
            tip=result.tip,
            tax=result.tax,
            total=result.total,
            totals=result.per_participant_total,
        )

    @staticmethod
    async def build_summary(db: AsyncSession, bill: Bill) -> SummaryResponse:
        """
        Allocate a bill and shape the result for the API.

        Args:
            db: Database session
            bill: Bill already checked for access

        Returns:
            Summary with per-participant totals
        """
        snapshot = await SummaryService.load_snapshot(db, bill)
        result = SummaryService.allocate_rounded(snapshot)
        return SummaryService.to_response(snapshot, result)
