"""Diary module repository implementation."""

from framework.repository import BaseRepository
from .models import Diary


class DiaryRepository(BaseRepository[Diary]):
    """Diary repository."""

    def __init__(self, session):
        super().__init__(session, Diary)
