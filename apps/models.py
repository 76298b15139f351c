"""
Model registration for migrations: import all models that should be migrated by Alembic here.
When adding/removing apps, add/remove the corresponding imports here; no need to change alembic/env.py.
"""
from apps.diaries.models import Diary
from apps.tasks.models import Task

__all__ = ["Diary", "Task"]
