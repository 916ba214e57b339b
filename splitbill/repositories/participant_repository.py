"""Participant data access"""
from typing import List, Optional
from uuid import UUID
from sqlalchemy import select, delete as sql_delete
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.item import ItemSplit
from splitbill.models.participant import Participant


class ParticipantRepository:
    """Repository for Participant database operations"""

    @staticmethod
    async def create_batch(db: AsyncSession, participants: List[Participant]) -> List[Participant]:
        """
        Create multiple participants in a batch.

        Args:
            db: Database session
            participants: List of Participant objects

        Returns:
            List of created participants
        """
        db.add_all(participants)
        await db.flush()

        # Refresh all participants
        for participant in participants:
            await db.refresh(participant)

        return participants

    @staticmethod
    async def get_by_bill(db: AsyncSession, bill_id: UUID) -> List[Participant]:
        """
        Get all participants of a bill in creation order.

        Args:
            db: Database session
            bill_id: Bill UUID

        Returns:
            List of participants
        """
        result = await db.execute(
            select(Participant)
            .where(Participant.bill_id == bill_id)
            .order_by(Participant.id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_in_bill(db: AsyncSession, bill_id: UUID, participant_id: int) -> Optional[Participant]:
        result = await db.execute(
            select(Participant).where(
                Participant.id == participant_id, Participant.bill_id == bill_id
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def delete(db: AsyncSession, participant: Participant) -> None:
        """
        Delete a participant and every split weight recorded for them.

        Args:
            db: Database session
            participant: Participant to delete
        """
        await db.execute(
            sql_delete(ItemSplit).where(ItemSplit.participant_id == participant.id)
        )
        await db.delete(participant)
        await db.flush()
