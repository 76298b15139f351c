"""
Pydantic schemas for task endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    title: str = Field(..., max_length=255)


class TaskUpdate(BaseModel):
    title: str = Field(..., max_length=255)


class TaskResult(BaseModel):
    """Summary returned by every task endpoint."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
