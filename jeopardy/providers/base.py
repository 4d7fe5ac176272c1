"""
Base Category Provider Interface

Abstract base class for remote trivia category sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CategorySummary:
    """A candidate category as listed by the remote source."""

    id: int
    title: str
    clues_count: int = 0


@dataclass(frozen=True)
class ClueRecord:
    """A raw question/answer pair from the remote source."""

    question: str
    answer: str


@dataclass
class CategoryDetail:
    """A category with its full, ordered clue list."""

    id: int
    title: str
    clues: List[ClueRecord] = field(default_factory=list)


class CategoryProvider(ABC):
    """
    Base class for category providers.

    Providers fetch trivia categories and their clues from a remote
    service, a local file, a fixture, etc.
    """

    @abstractmethod
    async def get_categories(self, count: int) -> List[CategorySummary]:
        """
        Fetch a pool of candidate categories.

        Args:
            count: Size of the pool to request

        Returns:
            List of CategorySummary objects (may be shorter than count)

        Raises:
            httpx.HTTPError: If a network error occurs
        """
        ...

    @abstractmethod
    async def get_category(self, category_id: int) -> CategoryDetail:
        """
        Fetch a single category with all of its clues.

        Args:
            category_id: Remote id of the category

        Returns:
            CategoryDetail with the clues in remote order
        """
        ...

    async def close(self) -> None:
        """
        Close any resources used by the provider.

        Override this in subclasses that need cleanup.
        """
        pass
