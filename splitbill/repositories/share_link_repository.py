"""Share link data access"""
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.share_link import ShareLink


class ShareLinkRepository:
    """Repository for ShareLink database operations"""

    @staticmethod
    async def create(db: AsyncSession, link: ShareLink) -> ShareLink:
        db.add(link)
        await db.flush()
        await db.refresh(link)
        return link

    @staticmethod
    async def get_by_token(db: AsyncSession, token: str) -> Optional[ShareLink]:
        result = await db.execute(select(ShareLink).where(ShareLink.token == token))
        return result.scalar_one_or_none()
