"""Jeopardy Board - Terminal Interface

Full-screen terminal front end for the jeopardy board, drawn with blessed.
"""

__version__ = '1.0.0'
__author__ = 'Jeopardy Board Contributors'

from .app import JeopardyTUI
from .board_view import TerminalBoardView

__all__ = ['JeopardyTUI', 'TerminalBoardView']
