"""Common schemas used across multiple modules"""
from typing import Any, Optional

from pydantic import BaseModel


class PaginationMeta(BaseModel):
    """Pagination metadata"""
    page: int
    page_size: int
    total_items: int
    total_pages: int


def blank_to_none(v: Any) -> Optional[Any]:
    """Treat empty form values as 'not set'"""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def clean_name(v: str) -> str:
    """Strip surrounding whitespace and reject empty names"""
    name = v.strip()
    if not name:
        raise ValueError("Name must not be empty")
    return name
