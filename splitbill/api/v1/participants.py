"""Participant endpoints"""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.api.deps import get_current_user
from splitbill.core.exceptions import AuthorizationError, NotFoundError
from splitbill.database import get_db
from splitbill.models.user import User
from splitbill.schemas.participant import (ParticipantCreate,
                                           ParticipantListResponse,
                                           ParticipantResponse)
from splitbill.services.participant_service import ParticipantService

router = APIRouter(prefix="/bills/{bill_id}/participants", tags=["Participants"])


@router.post("", response_model=ParticipantListResponse, status_code=status.HTTP_201_CREATED)
async def add_participants(
    bill_id: UUID,
    data: ParticipantCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Add one or more people to a bill.

    Args:
        bill_id: Bill UUID
        data: Names to add
        current_user: Current authenticated user
        db: Database session

    Returns:
        The created participants

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        participants = await ParticipantService.add_participants(
            bill_id, data, current_user.id, db
        )
        return ParticipantListResponse(
            participants=[ParticipantResponse.model_validate(p) for p in participants]
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except AuthorizationError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )


@router.get("", response_model=ParticipantListResponse)
async def list_participants(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List a bill's participants in the order they were added"""
    try:
        participants = await ParticipantService.list_participants(bill_id, current_user.id, db)
        return ParticipantListResponse(
            participants=[ParticipantResponse.model_validate(p) for p in participants]
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except AuthorizationError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_participant(
    bill_id: UUID,
    participant_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Remove a participant together with their split weights.

    Raises:
        404: If bill or participant not found
        403: If user is not the owner
    """
    try:
        await ParticipantService.delete_participant(
            bill_id, participant_id, current_user.id, db
        )
        return None
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except AuthorizationError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )
