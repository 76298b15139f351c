"""
Pydantic schemas for diary endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class DiaryCreate(BaseModel):
    # Blank titles are rejected by DiaryService, not here, so they surface as BadInput
    title: str = Field(..., max_length=255)
    comment: str = ""


class DiaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    comment: str
