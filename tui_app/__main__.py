#!/usr/bin/env python3
"""Entry point for running the jeopardy board in a terminal."""

import asyncio
import sys

from common import configure_logging, get_config
from jeopardy.controller import GameController
from jeopardy.errors import ConfigurationError
from jeopardy.providers.jservice import JServiceProvider

from .app import JeopardyTUI
from .board_view import TerminalBoardView


def main():
    """Main entry point for the terminal application."""
    try:
        conf, game_config, provider_kwargs = get_config()
        configure_logging(conf)
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        sys.exit(1)

    view = TerminalBoardView(cell_lines=int((conf.get('tui') or {}).get('cell_lines', 3)))
    provider = JServiceProvider(**provider_kwargs)

    try:
        controller = GameController(provider, view, game_config)
    except ConfigurationError as e:
        print(f"Invalid game settings: {e}")
        sys.exit(1)

    app = JeopardyTUI(controller, view)

    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == '__main__':
    main()
