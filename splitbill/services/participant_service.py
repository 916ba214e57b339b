"""Participant business logic"""
import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.core.exceptions import NotFoundError
from splitbill.models.participant import Participant
from splitbill.repositories.participant_repository import \
    ParticipantRepository
from splitbill.schemas.participant import ParticipantCreate
from splitbill.services.bill_service import BillService

logger = logging.getLogger(__name__)


class ParticipantService:
    """Service for the people sharing a bill"""

    @staticmethod
    async def add_participants(
        bill_id: UUID, data: ParticipantCreate, user_id: UUID, db: AsyncSession
    ) -> List[Participant]:
        """
        Add participants to a bill by name.

        Args:
            bill_id: Bill UUID
            data: Participant names, already trimmed
            user_id: Requesting user
            db: Database session

        Returns:
            Created participants in input order

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        participants = [Participant(bill_id=bill.id, name=name) for name in data.names]
        created = await ParticipantRepository.create_batch(db, participants)
        await db.commit()

        logger.info("Added %d participants to bill %s", len(created), bill.id)
        return created

    @staticmethod
    async def list_participants(
        bill_id: UUID, user_id: UUID, db: AsyncSession
    ) -> List[Participant]:
        bill = await BillService.get_owned_bill(bill_id, user_id, db)
        return await ParticipantRepository.get_by_bill(db, bill.id)

    @staticmethod
    async def delete_participant(
        bill_id: UUID, participant_id: int, user_id: UUID, db: AsyncSession
    ) -> bool:
        """
        Remove a participant and their split weights.

        Items they were part of fall back to the remaining weights, or to
        an equal split when no weight is left.

        Raises:
            NotFoundError: If bill or participant not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        participant = await ParticipantRepository.get_in_bill(db, bill.id, participant_id)
        if not participant:
            raise NotFoundError("Participant not found")

        await ParticipantRepository.delete(db, participant)
        await db.commit()
        return True
