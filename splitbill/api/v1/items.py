"""Item and split endpoints"""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.api.deps import get_current_user
from splitbill.core.exceptions import (AuthorizationError, NotFoundError,
                                       ValidationError)
from splitbill.database import get_db
from splitbill.models.user import User
from splitbill.schemas.item import (ItemCreate, ItemListResponse, ItemResponse,
                                    ItemUpdate, SplitEntry, SplitListResponse,
                                    SplitUpdate)
from splitbill.services.item_service import ItemService

router = APIRouter(prefix="/bills/{bill_id}/items", tags=["Items"])


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    bill_id: UUID,
    item_data: ItemCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Add an item to a bill.

    Until weights are set, the item is shared equally by all participants.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        item = await ItemService.add_item(bill_id, item_data, current_user.id, db)
        return ItemResponse.model_validate(item)
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


@router.get("", response_model=ItemListResponse)
async def list_items(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List a bill's items in the order they were added"""
    try:
        items = await ItemService.list_items(bill_id, current_user.id, db)
        return ItemListResponse(items=[ItemResponse.model_validate(i) for i in items])
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


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(
    bill_id: UUID,
    item_id: int,
    item_data: ItemUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Edit an item's name, price or quantity.

    Raises:
        404: If bill or item not found
        403: If user is not the owner
    """
    try:
        item = await ItemService.update_item(bill_id, item_id, item_data, current_user.id, db)
        return ItemResponse.model_validate(item)
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


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    bill_id: UUID,
    item_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Remove an item and its split weights.

    Raises:
        404: If bill or item not found
        403: If user is not the owner
    """
    try:
        await ItemService.delete_item(bill_id, item_id, current_user.id, db)
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


@router.get("/{item_id}/splits", response_model=SplitListResponse)
async def get_splits(
    bill_id: UUID,
    item_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get the recorded weights of an item (empty means equal split)"""
    try:
        splits = await ItemService.get_splits(bill_id, item_id, current_user.id, db)
        return SplitListResponse(
            item_id=item_id,
            splits=[SplitEntry.model_validate(s) for s in splits]
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


@router.put("/{item_id}/splits", response_model=SplitListResponse)
async def replace_splits(
    bill_id: UUID,
    item_id: int,
    split_data: SplitUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Replace an item's split weights.

    Args:
        bill_id: Bill UUID
        item_id: Item ID
        split_data: Participant id -> weight; an empty mapping clears the split
        current_user: Current authenticated user
        db: Database session

    Returns:
        The item's new weights

    Raises:
        400: If a weight names a participant outside the bill
        404: If bill or item not found
        403: If user is not the owner
    """
    try:
        splits = await ItemService.replace_splits(
            bill_id, item_id, split_data, current_user.id, db
        )
        return SplitListResponse(
            item_id=item_id,
            splits=[SplitEntry.model_validate(s) for s in splits]
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
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
