"""Authentication logic"""
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.models.user import User
from splitbill.repositories.user_repository import UserRepository
from splitbill.schemas.user import UserCreate
from splitbill.core.security import hash_password, verify_password, create_access_token
from splitbill.core.exceptions import ConflictError, AuthenticationError
from splitbill.config import get_settings

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations"""

    @staticmethod
    async def register_user(user_data: UserCreate, db: AsyncSession) -> User:
        """
        Register a new user.

        Args:
            user_data: User registration data
            db: Database session

        Returns:
            Created user

        Raises:
            ConflictError: If email or username already exists
        """
        if await UserRepository.check_email_exists(db, user_data.email):
            raise ConflictError(f"Email '{user_data.email}' is already registered")

        if await UserRepository.check_username_exists(db, user_data.username):
            raise ConflictError(f"Username '{user_data.username}' is already registered")

        new_user = User(
            email=user_data.email.lower(),
            username=user_data.username,
            hashed_password=hash_password(user_data.password),
            full_name=user_data.full_name,
            is_active=True
        )

        created_user = await UserRepository.create(db, new_user)
        await db.commit()

        logger.info("Registered user %s", created_user.username)
        return created_user

    @staticmethod
    async def authenticate_user(identifier: str, password: str, db: AsyncSession) -> Optional[User]:
        """
        Authenticate user with email/username and password.

        Args:
            identifier: Email or username
            password: Plain text password
            db: Database session

        Returns:
            User if authentication successful, None otherwise
        """
        user = await UserRepository.get_by_email_or_username(db, identifier)

        if not user or not user.is_active:
            return None

        if not verify_password(password, user.hashed_password):
            return None

        return user

    @staticmethod
    def create_access_token_for_user(user: User) -> dict:
        """
        Create JWT access token for user.

        Args:
            user: User object

        Returns:
            Dictionary with access_token, token_type, expires_in and username
        """
        settings = get_settings()
        access_token = create_access_token({"sub": str(user.id), "username": user.username})

        return {
            "access_token": access_token,
            "token_type": "bearer",
            "expires_in": settings.access_token_expire_minutes * 60,
            "username": user.username,
        }

    @staticmethod
    async def login(identifier: str, password: str, db: AsyncSession) -> dict:
        """
        Login user and return access token.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await AuthService.authenticate_user(identifier, password, db)

        if not user:
            logger.info("Failed login for %s", identifier)
            raise AuthenticationError("Incorrect email/username or password")

        return AuthService.create_access_token_for_user(user)
