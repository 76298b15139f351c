"""
Input checks shared by the domain services.
"""

from typing import Optional
from framework.exceptions.handler import BadInputException


def require_not_blank(field: str, value: Optional[str]) -> str:
    """Reject None, empty and whitespace-only values; return the value unchanged."""
    if value is None or not value.strip():
        raise BadInputException(field, f"{field} must not be empty")
    return value
