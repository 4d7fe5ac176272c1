"""Application loop tying the terminal view to a game controller."""

import asyncio
import logging
from typing import Optional

from blessed import Terminal

from jeopardy.controller import GameController
from jeopardy.errors import AcquisitionError

from .board_view import TerminalBoardView

logger = logging.getLogger(__name__)


MOVES = {
    'KEY_LEFT': (-1, 0),
    'KEY_RIGHT': (1, 0),
    'KEY_UP': (0, -1),
    'KEY_DOWN': (0, 1),
}


class JeopardyTUI:
    """Keyboard-driven front end for one GameController.

    Starting a game runs as a task so the screen keeps redrawing (and the
    loading indicator stays visible) while categories are fetched. A start
    request while one is in flight is dropped.
    """

    def __init__(self, controller: GameController, view: TerminalBoardView,
                 poll_interval: float = 0.05):
        self.controller = controller
        self.view = view
        self.term: Terminal = view.term
        self.poll_interval = poll_interval
        self._start_task: Optional[asyncio.Task] = None
        self._running = False

    @property
    def starting(self) -> bool:
        return self._start_task is not None and not self._start_task.done()

    def request_start(self) -> bool:
        """Schedule a new game unless one is already loading."""
        if self.starting or not self.view.start_enabled:
            logger.debug('Start request ignored while loading')
            return False
        self._start_task = asyncio.create_task(self._start())
        return True

    async def _start(self) -> None:
        try:
            await self.controller.start_game()
        except AcquisitionError as e:
            # Already shown on the board view by the controller
            logger.debug(f'Game start failed: {e}')
        except Exception as e:
            logger.exception('Unexpected error starting game')
            self.view.show_error(f'Could not start game: {e}')

    def handle_key(self, key) -> bool:
        """Apply one keystroke.

        Returns:
            False when the user asked to quit
        """
        if not key:
            return True

        if key.is_sequence:
            if key.name in MOVES:
                self.view.move(*MOVES[key.name])
            elif key.name == 'KEY_ENTER':
                self.view.activate_selected()
            return True

        char = str(key).lower()
        if char == 'q':
            return False
        if char == 's':
            self.request_start()
        elif char == ' ':
            self.view.activate_selected()
        return True

    async def run(self) -> None:
        """Run until the user quits."""
        self._running = True
        logger.info('Jeopardy board started')

        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            try:
                while self._running:
                    self.view.draw()
                    key = self.term.inkey(timeout=0)
                    if not key:
                        await asyncio.sleep(self.poll_interval)
                        continue
                    self._running = self.handle_key(key)
            finally:
                await self.stop()

    async def stop(self) -> None:
        """Cancel any pending start and release the controller."""
        self._running = False

        if self.starting:
            self._start_task.cancel()
            try:
                await self._start_task
            except asyncio.CancelledError:
                pass

        await self.controller.close()
        logger.info('Jeopardy board stopped')
