"""
Game Controller

Owns the board configuration, acquires categories and clues from a
provider, and turns the user's start action into a rendered board.

Acquisition:
    1. Request a pool of candidate categories
    2. Sample num_categories of them without replacement
    3. For each, fetch its clues and sample clues_per_category without replacement

Acquisition is all-or-nothing. Any failure leaves no board behind.
"""

import asyncio
import logging
import random
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx

from .board import BoardModel
from .clue import Category, Clue
from .errors import AcquisitionError, ConfigurationError
from .providers.base import CategoryDetail, CategoryProvider, CategorySummary
from .providers.jservice import JServiceError
from .view import BoardView

logger = logging.getLogger(__name__)


START_LABEL = "Start!"
RESTART_LABEL = "Start New Game!"
LOADING_LABEL = "Loading..."


class ControllerState(Enum):
    """Controller lifecycle."""

    IDLE = "idle"
    LOADING = "loading"
    PLAYING = "playing"


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass
class GameConfig:
    """
    Configuration for a board.

    Attributes:
        num_categories: Columns on the board
        clues_per_category: Rows on the board
        category_pool_size: Candidate categories requested before sampling
        max_clues_per_category: Clues a remote category is expected to carry
        concurrent_fetch: Fetch the sampled categories in parallel
    """

    num_categories: int = 6
    clues_per_category: int = 5
    category_pool_size: int = 100
    max_clues_per_category: int = 5
    concurrent_fetch: bool = False

    @classmethod
    def from_dict(cls, conf: Optional[Dict[str, Any]]) -> "GameConfig":
        """Build a config from a dict, ignoring unknown keys."""
        conf = conf or {}
        known = {f.name for f in fields(cls)}
        unknown = set(conf) - known
        if unknown:
            logger.warning(f"Ignoring unknown game settings: {sorted(unknown)}")
        return cls(**{k: v for k, v in conf.items() if k in known})

    def validate(self) -> None:
        """
        Check board dimensions against the pool limits.

        Raises:
            ConfigurationError: If any dimension is out of range
        """
        for name in (
            "num_categories",
            "clues_per_category",
            "category_pool_size",
            "max_clues_per_category",
        ):
            value = getattr(self, name)
            if not _is_positive_int(value):
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

        if self.clues_per_category > self.max_clues_per_category:
            raise ConfigurationError(
                f"clues_per_category ({self.clues_per_category}) exceeds the "
                f"{self.max_clues_per_category} clues available per category"
            )

        if self.num_categories > self.category_pool_size:
            raise ConfigurationError(
                f"num_categories ({self.num_categories}) exceeds the "
                f"category pool size ({self.category_pool_size})"
            )


class GameController:
    """
    Drives one board at a time.

    The entry point constructs a controller with a provider and a view
    and calls start_game() whenever the user asks for a new game. Only
    one start can be in flight; further requests are ignored until it
    finishes.
    """

    def __init__(
        self,
        provider: CategoryProvider,
        view: BoardView,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the controller.

        Args:
            provider: Source of categories and clues
            view: View the board is drawn on
            config: Board configuration (defaults to 6x5)
            rng: Random source used for sampling

        Raises:
            ConfigurationError: If config is invalid
        """
        self.provider = provider
        self.view = view
        self.config = config or GameConfig()
        self.config.validate()
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(f"{__name__}.GameController")

        self.board: Optional[BoardModel] = None
        self.last_error: Optional[AcquisitionError] = None
        self._state = ControllerState.IDLE
        self._games_started = 0

    @property
    def state(self) -> ControllerState:
        """Current controller state."""
        return self._state

    @state.setter
    def state(self, new_state: ControllerState) -> None:
        if new_state != self._state:
            self.logger.debug(f"State {self._state.value} -> {new_state.value}")
        self._state = new_state

    @property
    def is_loading(self) -> bool:
        return self._state == ControllerState.LOADING

    def configure(self, num_categories: int, clues_per_category: int) -> None:
        """
        Set the board dimensions for the next game.

        Args:
            num_categories: Number of category columns
            clues_per_category: Number of clues in each column

        Raises:
            ConfigurationError: If either value is not a positive integer
                or exceeds the pool limits
        """
        candidate = GameConfig(
            num_categories=num_categories,
            clues_per_category=clues_per_category,
            category_pool_size=self.config.category_pool_size,
            max_clues_per_category=self.config.max_clues_per_category,
            concurrent_fetch=self.config.concurrent_fetch,
        )
        candidate.validate()
        self.config = candidate

        self.logger.info(f"Configured {num_categories}x{clues_per_category} board")

    async def start_game(self) -> Optional[BoardModel]:
        """
        Acquire data and render a fresh board.

        Returns:
            The new BoardModel, or None if a start is already in progress

        Raises:
            AcquisitionError: If data could not be acquired. The view is
                left idle with no board and an error message.
        """
        if self.is_loading:
            self.logger.debug("Start ignored, a game is already loading")
            return None

        self.state = ControllerState.LOADING
        self.board = None
        self.last_error = None
        self.view.bind_activation(None)
        self.view.set_start_state(False, LOADING_LABEL)
        self.view.show_loading()

        try:
            categories = await self.acquire_categories()
        except AcquisitionError as e:
            self.last_error = e
            self.logger.error(f"Could not start game: {e}")
            self._return_to_idle()
            self.view.show_error(f"Could not load trivia data: {e}")
            raise
        except BaseException:
            self._return_to_idle()
            raise

        self.view.hide_loading()

        board = BoardModel(categories, self.view)
        board.render()
        self.board = board

        self._games_started += 1
        self.state = ControllerState.PLAYING
        self.view.set_start_state(True, self._start_label())

        self.logger.info(
            f"Game {self._games_started} started: "
            f"{', '.join(c.title for c in categories)}"
        )
        return board

    def _start_label(self) -> str:
        return RESTART_LABEL if self._games_started else START_LABEL

    def _return_to_idle(self) -> None:
        """Clear the loader and re-enable the start trigger after a failed start."""
        self.view.hide_loading()
        self.state = ControllerState.IDLE
        self.view.set_start_state(True, self._start_label())

    async def acquire_categories(self) -> List[Category]:
        """
        Fetch and sample categories and clues for one board.

        Returns:
            num_categories Category objects with clues_per_category clues each

        Raises:
            AcquisitionError: On any network failure, malformed payload,
                or insufficient categories or clues
        """
        category_ids = await self.sample_category_ids()

        if self.config.concurrent_fetch:
            categories = await asyncio.gather(
                *(self.fetch_category(category_id) for category_id in category_ids)
            )
            return list(categories)

        categories = []
        for category_id in category_ids:
            categories.append(await self.fetch_category(category_id))
        return categories

    async def sample_category_ids(self) -> List[int]:
        """
        Request the candidate pool and sample category ids from it.

        Raises:
            AcquisitionError: If the request fails or the pool is too small
        """
        wanted = self.config.num_categories

        try:
            pool = await self.provider.get_categories(self.config.category_pool_size)
        except (httpx.HTTPError, JServiceError, ValueError) as e:
            raise AcquisitionError(f"category list unavailable ({e})") from e

        candidates = self._unique_by_id(pool)
        if len(candidates) < wanted:
            raise AcquisitionError(
                f"needed {wanted} categories, source returned {len(candidates)}"
            )

        sampled = self.rng.sample(candidates, wanted)
        self.logger.debug(f"Sampled categories {[c.id for c in sampled]}")
        return [c.id for c in sampled]

    async def fetch_category(self, category_id: int) -> Category:
        """
        Fetch one category and sample its clues.

        Args:
            category_id: Remote id of the category

        Raises:
            AcquisitionError: If the request fails or it has too few clues
        """
        wanted = self.config.clues_per_category

        try:
            detail: CategoryDetail = await self.provider.get_category(category_id)
        except (httpx.HTTPError, JServiceError, ValueError) as e:
            raise AcquisitionError(f"category {category_id} unavailable ({e})") from e

        if len(detail.clues) < wanted:
            raise AcquisitionError(
                f"category {category_id} '{detail.title}' has "
                f"{len(detail.clues)} clues, needed {wanted}"
            )

        records = self.rng.sample(detail.clues, wanted)
        return Category(
            title=detail.title,
            clues=[Clue(question=r.question, answer=r.answer) for r in records],
        )

    @staticmethod
    def _unique_by_id(pool: List[CategorySummary]) -> List[CategorySummary]:
        """Drop repeated category ids, keeping the first occurrence."""
        seen = set()
        unique = []
        for summary in pool:
            if summary.id in seen:
                continue
            seen.add(summary.id)
            unique.append(summary)
        return unique

    async def close(self) -> None:
        """Release provider resources."""
        await self.provider.close()
