"""Terminal board view drawn with blessed."""

from typing import List, Optional

from blessed import Terminal

from jeopardy.board import CellAddress, RenderedBoard, RenderedCell
from jeopardy.clue import CellStyle
from jeopardy.view import ActivationHandler, BoardView


TITLE = 'JEOPARDY!'
HELP = 's: start  arrows: move  enter/space: reveal  q: quit'
LOADING_TEXT = 'Loading categories...'


class TerminalBoardView(BoardView):
    """Board view that renders the grid as a full-screen table.

    The view keeps its own copy of what is on screen and redraws when
    something changes. Keys are fed in by the application loop; the
    view only tracks the selection and forwards activations to the
    bound handler.
    """

    def __init__(self, term: Optional[Terminal] = None, cell_lines: int = 3):
        self.term = term or Terminal()
        self.cell_lines = cell_lines

        self.loading = False
        self.error: Optional[str] = None
        self.start_enabled = True
        self.start_label = 'Start!'
        self.board: Optional[RenderedBoard] = None
        self.selected = CellAddress(0, 0)
        self.dirty = True
        self._handler: Optional[ActivationHandler] = None

    # BoardView interface

    def show_loading(self) -> None:
        self.board = None
        self.error = None
        self.loading = True
        self.dirty = True

    def hide_loading(self) -> None:
        self.loading = False
        self.dirty = True

    def show_error(self, message: str) -> None:
        self.error = message
        self.dirty = True

    def set_start_state(self, enabled: bool, label: str) -> None:
        self.start_enabled = enabled
        self.start_label = label
        self.dirty = True

    def draw_board(self, board: RenderedBoard) -> None:
        self.board = board
        self.selected = CellAddress(0, 0)
        self.dirty = True

    def update_cell(self, cell: RenderedCell) -> None:
        # Cells are shared with the board, only a redraw is needed
        self.dirty = True

    def bind_activation(self, handler: Optional[ActivationHandler]) -> None:
        self._handler = handler

    # Input

    def move(self, d_category: int, d_clue: int) -> None:
        """Move the selection, clamped to the board edges."""
        if self.board is None:
            return
        max_category = len(self.board.headers) - 1
        max_clue = len(self.board.rows) - 1
        self.selected = CellAddress(
            min(max(self.selected.category_index + d_category, 0), max_category),
            min(max(self.selected.clue_index + d_clue, 0), max_clue),
        )
        self.dirty = True

    def activate_selected(self):
        """Send the selected cell to the bound handler, if any."""
        if self._handler is None or self.board is None:
            return None
        return self._handler(self.selected)

    # Drawing

    def _style(self, cell: RenderedCell, text: str) -> str:
        term = self.term
        if cell.style == CellStyle.QUESTION:
            text = term.white_on_blue(text)
        elif cell.style == CellStyle.ANSWER:
            text = term.black_on_yellow(text)
        else:
            text = term.bold(text)
        if cell.address == self.selected:
            text = term.reverse(text)
        return text

    def _cell_block(self, text: str, width: int) -> List[str]:
        lines = self.term.wrap(text, width) or ['']
        if len(lines) > self.cell_lines:
            lines = lines[:self.cell_lines]
            lines[-1] = lines[-1][:max(width - 1, 0)] + '~'
        lines += [''] * (self.cell_lines - len(lines))
        return [self.term.center(line, width) for line in lines]

    def render_lines(self) -> List[str]:
        """Build the screen as a list of lines."""
        term = self.term
        start = self.start_label if self.start_enabled else '(%s)' % self.start_label
        lines = [term.bold(TITLE) + '  [s] ' + start, HELP, '']

        if self.loading:
            lines.append(LOADING_TEXT)
        if self.error:
            lines.append(term.red(self.error))
        if self.board is None:
            return lines

        columns = len(self.board.headers)
        width = max((term.width - (columns + 1)) // columns, 4)
        rule = '+' + '+'.join('-' * width for _ in range(columns)) + '+'

        lines.append(rule)
        header_blocks = [self._cell_block(title.upper(), width) for title in self.board.headers]
        for i in range(self.cell_lines):
            lines.append('|' + '|'.join(term.bold(block[i]) for block in header_blocks) + '|')
        lines.append(rule)

        for row in self.board.rows:
            blocks = [self._cell_block(cell.text, width) for cell in row]
            for i in range(self.cell_lines):
                lines.append('|' + '|'.join(
                    self._style(cell, block[i]) for cell, block in zip(row, blocks)
                ) + '|')
            lines.append(rule)

        return lines

    def draw(self) -> None:
        """Redraw the whole screen if anything changed."""
        if not self.dirty:
            return
        term = self.term
        print(term.home + term.clear + '\n'.join(self.render_lines()), end='', flush=True)
        self.dirty = False
