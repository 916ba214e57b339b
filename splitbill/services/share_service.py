"""Public share links"""
import logging
import uuid
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.config import get_settings
from splitbill.core.exceptions import NotFoundError
from splitbill.models.share_link import ShareLink
from splitbill.repositories.bill_repository import BillRepository
from splitbill.repositories.share_link_repository import ShareLinkRepository
from splitbill.schemas.item import ItemResponse
from splitbill.schemas.summary import ShareLinkResponse, SharedBillResponse
from splitbill.services.bill_service import BillService
from splitbill.services.summary_service import SummaryService

logger = logging.getLogger(__name__)


class ShareService:
    """Read-only links that let anyone view a bill's split"""

    @staticmethod
    def share_path(token: str) -> str:
        return f"{get_settings().api_prefix}/share/{token}"

    @staticmethod
    async def create_share_link(
        bill_id: UUID, user_id: UUID, db: AsyncSession
    ) -> ShareLinkResponse:
        """
        Create a new share token for a bill.

        Every call issues a fresh token; earlier tokens stay valid.

        Raises:
            NotFoundError: If bill not found
            AuthorizationError: If user is not the owner
        """
        bill = await BillService.get_owned_bill(bill_id, user_id, db)

        link = await ShareLinkRepository.create(
            db, ShareLink(token=str(uuid.uuid4()), bill_id=bill.id)
        )
        await db.commit()

        logger.info("Created share link for bill %s", bill.id)
        return ShareLinkResponse(token=link.token, path=ShareService.share_path(link.token))

    @staticmethod
    async def get_shared_bill(token: str, db: AsyncSession) -> SharedBillResponse:
        """
        Resolve a share token to the bill's participants, items and totals.

        Args:
            token: Share token
            db: Database session

        Returns:
            Public view of the bill

        Raises:
            NotFoundError: If the token is unknown or the bill is gone
        """
        link = await ShareLinkRepository.get_by_token(db, token)
        if not link:
            raise NotFoundError("Share link not found")

        bill = await BillRepository.get_by_id(db, link.bill_id)
        if not bill:
            raise NotFoundError("Bill not found")

        participants, items, splits = await SummaryService.load_contents(db, bill)
        snapshot = SummaryService.build_snapshot(bill, participants, items, splits)
        summary = SummaryService.to_response(
            snapshot, SummaryService.allocate_rounded(snapshot)
        )

        return SharedBillResponse(
            **summary.model_dump(),
            bill_id=bill.id,
            title=bill.title,
            items=[ItemResponse.model_validate(item) for item in items],
        )
