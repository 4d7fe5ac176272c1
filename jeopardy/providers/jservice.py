"""
jService Provider

Fetches Jeopardy categories and clues from a jService-compatible API.
https://jservice.io/
"""

import html
import logging
import re
from typing import Any, List, Optional

import httpx

from .base import CategoryDetail, CategoryProvider, CategorySummary, ClueRecord

logger = logging.getLogger(__name__)

_MARKUP = re.compile(r"<[^>]+>")


class JServiceError(Exception):
    """Malformed response from a jService API."""

    def __init__(self, endpoint: str, message: str):
        self.endpoint = endpoint
        self.message = message
        super().__init__(f"jService {endpoint}: {message}")


def clean_text(value: Any) -> str:
    """Decode HTML entities and drop inline markup such as <i>...</i>."""
    if value is None:
        return ""
    text = html.unescape(str(value))
    text = _MARKUP.sub("", text)
    return " ".join(text.split())


class JServiceProvider(CategoryProvider):
    """
    jService provider.

    Endpoints used:
    - GET /categories?count=N  -> [{"id": 11531, "title": "...", "clues_count": 5}, ...]
    - GET /category?id=ID      -> {"id": ..., "title": "...", "clues": [{"question", "answer"}, ...]}

    Clues with a blank question or answer are dropped while parsing.
    """

    DEFAULT_BASE_URL = "https://jservice.io/api"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize jService provider.

        Args:
            base_url: API root, without trailing slash
            timeout: HTTP request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self.logger = logging.getLogger(f"{__name__}.JServiceProvider")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def get_categories(self, count: int) -> List[CategorySummary]:
        """
        Fetch a pool of categories.

        Args:
            count: Number of categories to request

        Returns:
            List of CategorySummary objects

        Raises:
            JServiceError: If the payload is not a list of categories
            httpx.HTTPError: If network error occurs
        """
        client = await self._get_client()

        self.logger.debug(f"Fetching {count} categories from {self.base_url}")

        response = await client.get(
            f"{self.base_url}/categories",
            params={"count": count},
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, list):
            raise JServiceError("categories", "expected a list of categories")

        categories = [self._parse_summary(item) for item in data]

        self.logger.debug(f"Fetched {len(categories)} categories")
        return categories

    async def get_category(self, category_id: int) -> CategoryDetail:
        """
        Fetch one category with its clues.

        Args:
            category_id: jService category id

        Returns:
            CategoryDetail object

        Raises:
            JServiceError: If the payload is not a category
            httpx.HTTPError: If network error occurs
        """
        client = await self._get_client()

        response = await client.get(
            f"{self.base_url}/category",
            params={"id": category_id},
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict) or not isinstance(data.get("clues"), list):
            raise JServiceError("category", f"no clue list for category {category_id}")

        clues = []
        for raw in data["clues"]:
            clue = self._parse_clue(raw)
            if clue is None:
                self.logger.debug(f"Skipping blank clue in category {category_id}")
                continue
            clues.append(clue)

        try:
            detail_id = int(data.get("id", category_id))
        except (TypeError, ValueError) as e:
            raise JServiceError("category", f"bad id {data.get('id')!r}") from e

        detail = CategoryDetail(
            id=detail_id,
            title=clean_text(data.get("title")),
            clues=clues,
        )

        self.logger.debug(
            f"Fetched category {detail.id} '{detail.title}' with {len(clues)} clues"
        )
        return detail

    def _parse_summary(self, data: Any) -> CategorySummary:
        """
        Parse a /categories entry.

        Args:
            data: Raw category data from API

        Returns:
            CategorySummary object
        """
        if not isinstance(data, dict) or "id" not in data:
            raise JServiceError("categories", f"malformed category entry: {data!r}")

        try:
            return CategorySummary(
                id=int(data["id"]),
                title=clean_text(data.get("title")),
                clues_count=int(data.get("clues_count") or 0),
            )
        except (TypeError, ValueError) as e:
            raise JServiceError("categories", f"malformed category entry: {data!r}") from e

    def _parse_clue(self, data: Any) -> Optional[ClueRecord]:
        """Parse a clue, returning None when it has nothing to show."""
        if not isinstance(data, dict):
            return None

        question = clean_text(data.get("question"))
        answer = clean_text(data.get("answer"))
        if not question or not answer:
            return None

        return ClueRecord(question=question, answer=answer)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
