"""Bill endpoints"""
import json
import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.api.deps import get_cache, get_current_user
from splitbill.config import get_settings
from splitbill.core.exceptions import AuthorizationError, NotFoundError
from splitbill.database import get_db
from splitbill.models.user import User
from splitbill.schemas.bill import (AdjustmentUpdate, BillCreate,
                                    BillDetailResponse, BillListResponse,
                                    BillResponse)
from splitbill.schemas.common import PaginationMeta
from splitbill.schemas.summary import ShareLinkResponse, SummaryResponse
from splitbill.services.bill_service import BillService
from splitbill.services.cache_service import CacheService
from splitbill.services.receipt_service import ReceiptService
from splitbill.services.share_service import ShareService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bills", tags=["Bills"])


def _idempotency_cache_key(idempotency_key: str, user_id: UUID) -> str:
    return f"idempotency:bill:{idempotency_key}:{user_id}"


@router.post("", response_model=BillResponse, status_code=status.HTTP_201_CREATED)
async def create_bill(
    bill_data: BillCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key")
):
    """
    Create a new, empty bill.

    Supports idempotency via the `Idempotency-Key` header: repeating a
    request with the same key returns the bill created the first time
    instead of creating another one.

    Args:
        bill_data: Optional title
        current_user: Current authenticated user
        db: Database session
        cache: Redis cache
        idempotency_key: Optional idempotency key for preventing duplicates

    Returns:
        Created bill
    """
    if idempotency_key:
        cache_key = _idempotency_cache_key(idempotency_key, current_user.id)
        cached_response = await cache.get(cache_key)

        if cached_response:
            logger.debug("Replaying bill creation for key %s", idempotency_key)
            return BillResponse(**json.loads(cached_response))

    bill = await BillService.create_bill(bill_data, current_user.id, db)
    response = BillResponse.model_validate(bill)

    if idempotency_key:
        await cache.set(
            _idempotency_cache_key(idempotency_key, current_user.id),
            json.dumps(response.model_dump(mode="json")),
            ttl=get_settings().idempotency_ttl_seconds,
        )

    return response


@router.get("", response_model=BillListResponse)
async def list_bills(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Items per page"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Get the current user's bill history, newest first.

    Each row carries the bill's totals so the history can be shown without
    opening every bill.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page (max 100)
        current_user: Current authenticated user
        db: Database session

    Returns:
        Paginated list of bills with metadata
    """
    page_size = page_size or get_settings().history_page_size
    rows, total_count = await BillService.list_bills(
        current_user.id, db, page=page, page_size=page_size
    )

    total_pages = (total_count + page_size - 1) // page_size if total_count > 0 else 0

    return BillListResponse(
        items=rows,
        pagination=PaginationMeta(
            page=page,
            page_size=page_size,
            total_items=total_count,
            total_pages=total_pages
        )
    )


@router.get("/{bill_id}", response_model=BillDetailResponse)
async def get_bill(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Get a bill with its participants, items and split weights.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        return await BillService.get_bill_details(bill_id, current_user.id, db)
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


@router.delete("/{bill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bill(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a bill permanently.

    Participants, items, splits and share links go with it.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        await BillService.delete_bill(bill_id, current_user.id, db)
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


@router.post("/{bill_id}/save", response_model=BillResponse)
async def save_bill(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Mark a bill as saved to the user's history"""
    try:
        bill = await BillService.save_bill(bill_id, current_user.id, db)
        return BillResponse.model_validate(bill)
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


@router.post("/{bill_id}/reset", response_model=BillResponse)
async def reset_bill(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Empty a bill.

    Removes participants, items and splits and clears discount, tip and
    tax. The bill itself and its share links are kept.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        bill = await BillService.reset_bill(bill_id, current_user.id, db)
        return BillResponse.model_validate(bill)
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


@router.put("/{bill_id}/adjustments", response_model=BillResponse)
async def update_adjustments(
    bill_id: UUID,
    adjustments: AdjustmentUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Set discount, tip and tax.

    For each of the three, an amount takes precedence over a percent.
    Fields left out are cleared.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        bill = await BillService.update_adjustments(bill_id, adjustments, current_user.id, db)
        return BillResponse.model_validate(bill)
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


@router.get("/{bill_id}/summary", response_model=SummaryResponse)
async def get_summary(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Get what each participant pays.

    Returns:
        Subtotal, discount, tip, tax, grand total and a participant id ->
        amount mapping that adds up to the grand total

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        return await BillService.get_summary(bill_id, current_user.id, db)
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


@router.get("/{bill_id}/receipt", response_class=PlainTextResponse)
async def download_receipt(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Download a plain-text receipt of the bill.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        receipt = await ReceiptService.build_receipt(bill_id, current_user.id, db)
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

    return PlainTextResponse(
        receipt,
        headers={"Content-Disposition": f'attachment; filename="receipt-{bill_id}.txt"'},
    )


@router.post("/{bill_id}/share", response_model=ShareLinkResponse, status_code=status.HTTP_201_CREATED)
async def create_share_link(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a public read-only link to the bill.

    Raises:
        404: If bill not found
        403: If user is not the owner
    """
    try:
        return await ShareService.create_share_link(bill_id, current_user.id, db)
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
