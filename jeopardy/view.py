"""
Board View Interface

Abstract presentation layer the controller and board model draw through.
Concrete views (terminal, test doubles) implement every method.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .board import CellAddress, RenderedBoard, RenderedCell


ActivationHandler = Callable[["CellAddress"], object]


class BoardView(ABC):
    """
    Base class for board views.

    A view owns exactly one activation handler at a time. Binding a new
    handler replaces the previous one.
    """

    @abstractmethod
    def show_loading(self) -> None:
        """Clear any current board and show the loading indicator."""
        ...

    @abstractmethod
    def hide_loading(self) -> None:
        """Remove the loading indicator."""
        ...

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Tell the user that something went wrong."""
        ...

    @abstractmethod
    def set_start_state(self, enabled: bool, label: str) -> None:
        """Enable or disable the start trigger and set its label."""
        ...

    @abstractmethod
    def draw_board(self, board: "RenderedBoard") -> None:
        """Replace whatever is displayed with a freshly rendered board."""
        ...

    @abstractmethod
    def update_cell(self, cell: "RenderedCell") -> None:
        """Redraw a single cell after its content changed."""
        ...

    @abstractmethod
    def bind_activation(self, handler: Optional[ActivationHandler]) -> None:
        """
        Set the single handler called with a CellAddress on activation.

        Args:
            handler: Callable, or None to unbind
        """
        ...
