"""Trivia category providers package."""

from .base import CategoryDetail, CategoryProvider, CategorySummary, ClueRecord
from .jservice import JServiceError, JServiceProvider

__all__ = [
    "CategoryDetail",
    "CategoryProvider",
    "CategorySummary",
    "ClueRecord",
    "JServiceError",
    "JServiceProvider",
]
