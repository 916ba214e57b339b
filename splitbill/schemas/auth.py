"""Auth schemas"""
from pydantic import BaseModel, Field


class Token(BaseModel):
    """Token response schema"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token expiration time in seconds")
    username: str
