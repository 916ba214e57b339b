"""User data access"""
from typing import Optional
from uuid import UUID
from sqlalchemy import func, select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.user import User


class UserRepository:
    """Repository for User database operations"""

    @staticmethod
    async def create(db: AsyncSession, user: User) -> User:
        """
        Create a new user.

        Args:
            db: Database session
            user: User object to create

        Returns:
            Created user
        """
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: UUID) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        """Emails are stored lower-case; lookups ignore case"""
        result = await db.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_username(db: AsyncSession, username: str) -> Optional[User]:
        result = await db.execute(
            select(User).where(func.lower(User.username) == username.lower())
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email_or_username(db: AsyncSession, identifier: str) -> Optional[User]:
        """
        Get user by email or username, ignoring case.

        Args:
            db: Database session
            identifier: Email or username

        Returns:
            User if found, None otherwise
        """
        lowered = identifier.lower()
        result = await db.execute(
            select(User).where(
                or_(func.lower(User.email) == lowered, func.lower(User.username) == lowered)
            )
        )
        return result.scalars().first()

    @staticmethod
    async def check_email_exists(db: AsyncSession, email: str) -> bool:
        user = await UserRepository.get_by_email(db, email)
        return user is not None

    @staticmethod
    async def check_username_exists(db: AsyncSession, username: str) -> bool:
        user = await UserRepository.get_by_username(db, username)
        return user is not None
