"""
Jeopardy Board Package

An interactive trivia board backed by a jService-compatible API.

Each game samples categories and clues from the remote source and lays
them out as a grid. Activating a cell shows its question, activating it
again shows the answer.
"""

from .board import BoardModel, CellAddress, RenderedBoard, RenderedCell
from .clue import Category, CellStyle, Clue, Reveal, RevealStage, advance
from .controller import ControllerState, GameConfig, GameController
from .errors import AcquisitionError, ConfigurationError, JeopardyError
from .providers.base import CategoryProvider
from .providers.jservice import JServiceProvider
from .view import BoardView

__version__ = "1.0.0"

__all__ = [
    # Clue module
    "Category",
    "CellStyle",
    "Clue",
    "Reveal",
    "RevealStage",
    "advance",
    # Board module
    "BoardModel",
    "CellAddress",
    "RenderedBoard",
    "RenderedCell",
    # Controller module
    "ControllerState",
    "GameConfig",
    "GameController",
    # Errors
    "AcquisitionError",
    "ConfigurationError",
    "JeopardyError",
    # Providers and views
    "BoardView",
    "CategoryProvider",
    "JServiceProvider",
]
