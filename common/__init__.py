"""Common utilities for the jeopardy board."""
from .config import configure_logger, configure_logging, get_config, load_config

__all__ = ['get_config', 'load_config', 'configure_logger', 'configure_logging']
