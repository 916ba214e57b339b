"""Public share endpoints"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.core.exceptions import NotFoundError
from splitbill.database import get_db
from splitbill.schemas.summary import SharedBillResponse
from splitbill.services.share_service import ShareService

router = APIRouter(prefix="/share", tags=["Share"])


@router.get("/{token}", response_model=SharedBillResponse)
async def get_shared_bill(
    token: str,
    db: AsyncSession = Depends(get_db)
):
    """
    View a shared bill without logging in.

    Raises:
        404: If the link does not exist
    """
    try:
        return await ShareService.get_shared_bill(token, db)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
