"""
Board Model

Holds the categories for one game, lays them out as a grid and routes
cell activations to the reveal state machine.

Grid layout: one column per category, one row per clue index. Every
cell carries a CellAddress of (category_index, clue_index).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional

from .clue import (
    Category,
    CellStyle,
    Clue,
    Reveal,
    RevealStage,
    advance,
    current_reveal,
)
from .view import BoardView

logger = logging.getLogger(__name__)


class CellAddress(NamedTuple):
    """Position of a clue on the board."""

    category_index: int
    clue_index: int


@dataclass
class RenderedCell:
    """A body cell as currently displayed."""

    address: CellAddress
    text: str
    style: CellStyle


@dataclass
class RenderedBoard:
    """
    A rendered grid.

    Attributes:
        headers: Category titles, in category order
        rows: rows[clue_index][category_index] -> RenderedCell
    """

    headers: List[str]
    rows: List[List[RenderedCell]] = field(default_factory=list)

    @property
    def cells(self) -> List[RenderedCell]:
        """All body cells, row by row."""
        return [cell for row in self.rows for cell in row]

    def cell(self, address: CellAddress) -> RenderedCell:
        return self.rows[address.clue_index][address.category_index]


class BoardModel:
    """
    The board for one game.

    Responsible for:
    - Building the rendered grid from the categories
    - Binding the view's activation handler (once per render)
    - Advancing clues when their cell is activated
    """

    def __init__(self, categories: List[Category], view: BoardView):
        """
        Initialize a board.

        Args:
            categories: Categories in column order, all with the same clue count
            view: View to draw on
        """
        if not categories:
            raise ValueError("A board needs at least one category")

        per_category = {len(category.clues) for category in categories}
        if len(per_category) != 1 or 0 in per_category:
            raise ValueError("Every category must have the same, non-zero clue count")

        self.categories = categories
        self.view = view
        self.rendered: Optional[RenderedBoard] = None
        self._cells: Dict[CellAddress, RenderedCell] = {}

    @property
    def num_categories(self) -> int:
        return len(self.categories)

    @property
    def clues_per_category(self) -> int:
        return len(self.categories[0].clues)

    def clue_at(self, address: CellAddress) -> Clue:
        """
        Resolve a cell address to its clue.

        Raises:
            KeyError: If the address is not on this board
        """
        category_index, clue_index = address
        if not (0 <= category_index < self.num_categories) or not (
            0 <= clue_index < self.clues_per_category
        ):
            raise KeyError(address)
        return self.categories[category_index].clues[clue_index]

    def render(self) -> RenderedBoard:
        """
        Build the grid and hand it to the view.

        Calling render again replaces the previous rendering and rebinds
        the same single activation handler.

        Returns:
            The RenderedBoard now on display
        """
        headers = [category.title for category in self.categories]
        rows = []
        for clue_index in range(self.clues_per_category):
            row = []
            for category_index, category in enumerate(self.categories):
                reveal = current_reveal(category.clues[clue_index])
                row.append(
                    RenderedCell(
                        address=CellAddress(category_index, clue_index),
                        text=reveal.display_text,
                        style=reveal.style,
                    )
                )
            rows.append(row)

        self.rendered = RenderedBoard(headers=headers, rows=rows)
        self._cells = {cell.address: cell for cell in self.rendered.cells}

        self.view.draw_board(self.rendered)
        self.view.bind_activation(self.handle_cell_activation)

        logger.debug(
            f"Rendered {self.num_categories}x{self.clues_per_category} board"
        )
        return self.rendered

    def handle_cell_activation(self, address: CellAddress) -> Optional[Reveal]:
        """
        Advance the clue behind an activated cell and redraw that cell.

        Args:
            address: Cell that was activated

        Returns:
            The new Reveal, or None if the clue already shows its answer
        """
        address = CellAddress(*address)
        clue = self.clue_at(address)

        if clue.stage == RevealStage.ANSWER:
            return None

        reveal = advance(clue)

        cell = self._cells.get(address)
        if cell is not None:
            cell.text = reveal.display_text
            cell.style = reveal.style
            self.view.update_cell(cell)

        logger.debug(f"Cell {tuple(address)} now {clue.stage.value}")
        return reveal
