"""
Jeopardy Board Errors

Exception hierarchy shared by the controller, board and providers.
"""


class JeopardyError(Exception):
    """Base class for all jeopardy board errors."""


class AcquisitionError(JeopardyError):
    """
    Remote data could not be acquired for a new board.

    Raised when a fetch fails or returns fewer categories or clues
    than the board is configured for. Acquisition is all-or-nothing,
    so a game never starts with a partial board.
    """


class ConfigurationError(JeopardyError, ValueError):
    """Invalid board dimensions or game settings."""
