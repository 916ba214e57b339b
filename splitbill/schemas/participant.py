"""Participant schemas"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from splitbill.schemas.common import clean_name


class ParticipantCreate(BaseModel):
    """Names of people to add to a bill"""

    names: List[str] = Field(..., min_length=1, max_length=100)

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: List[str]) -> List[str]:
        names = [clean_name(name) for name in v]
        if any(len(name) > 255 for name in names):
            raise ValueError("Participant names are limited to 255 characters")
        return names


class ParticipantResponse(BaseModel):
    """Response schema for a participant"""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ParticipantListResponse(BaseModel):
    """Participants of a bill in creation order"""

    participants: List[ParticipantResponse]
