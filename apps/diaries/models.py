from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from typing import Optional

class Diary(SQLModel, table=True):
    """Top-level journal entry; immutable once created."""
    __tablename__ = "diaries"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, description="Diary title (non-blank)")
    comment: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, default=""),
        description="Free-form comment"
    )
