from sqlmodel import SQLModel, Field
from typing import Optional

class Task(SQLModel, table=True):
    """Sub-item of a diary, addressed by its own id only."""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, description="Task title (non-blank)")
    # Route diary id at creation time; deliberately not a foreign key
    diary_id: Optional[int] = Field(default=None, index=True, description="Diary the task was created under")
