"""Auth endpoints"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from splitbill.api.deps import get_current_user
from splitbill.core.exceptions import AuthenticationError, ConflictError
from splitbill.database import get_db
from splitbill.models.user import User
from splitbill.schemas.auth import Token
from splitbill.schemas.user import UserCreate, UserResponse
from splitbill.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new user.

    Args:
        user_data: User registration data
        db: Database session

    Returns:
        Created user (without password)

    Raises:
        409: If email or username already exists
    """
    try:
        user = await AuthService.register_user(user_data, db)
        return UserResponse.model_validate(user)
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """
    Login with email/username and password.

    OAuth2 password flow; the ``username`` form field accepts either the
    username or the email address.

    Raises:
        401: If credentials are invalid
    """
    try:
        token_response = await AuthService.login(form_data.username, form_data.password, db)
        return Token(**token_response)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Get the profile of the authenticated user"""
    return UserResponse.model_validate(current_user)
