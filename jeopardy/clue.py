"""
Clue Models and Reveal State Machine

Data models for categories and clues, plus the transition function
that walks a clue through its reveal stages:

    HIDDEN -> QUESTION -> ANSWER

ANSWER is terminal. Advancing a clue that already shows its answer
leaves it untouched and re-reports the answer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


HIDDEN_MARKER = "?"


class RevealStage(Enum):
    """How much of a clue is currently visible."""

    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


class CellStyle(Enum):
    """Presentational flag for a board cell."""

    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    """
    A single question/answer pair on the board.

    Attributes:
        question: Text shown on the first activation
        answer: Text shown on the second activation
        stage: Current reveal stage, only changed through advance()
    """

    question: str
    answer: str
    stage: RevealStage = RevealStage.HIDDEN


@dataclass
class Category:
    """A titled column of clues."""

    title: str
    clues: List[Clue] = field(default_factory=list)


@dataclass(frozen=True)
class Reveal:
    """What a cell should display after a transition."""

    display_text: str
    style: CellStyle


def advance(clue: Clue) -> Reveal:
    """
    Move a clue to its next reveal stage.

    Args:
        clue: The clue to advance (mutated in place)

    Returns:
        Reveal with the text and style the cell should now show
    """
    if clue.stage == RevealStage.HIDDEN:
        clue.stage = RevealStage.QUESTION
        return Reveal(clue.question, CellStyle.QUESTION)

    if clue.stage == RevealStage.QUESTION:
        clue.stage = RevealStage.ANSWER

    return Reveal(clue.answer, CellStyle.ANSWER)


def current_reveal(clue: Clue) -> Reveal:
    """Display for the clue's current stage, without advancing it."""
    if clue.stage == RevealStage.HIDDEN:
        return Reveal(HIDDEN_MARKER, CellStyle.HIDDEN)
    if clue.stage == RevealStage.QUESTION:
        return Reveal(clue.question, CellStyle.QUESTION)
    return Reveal(clue.answer, CellStyle.ANSWER)
