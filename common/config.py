#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import json
import logging
import sys

import yaml

from jeopardy.controller import GameConfig
from jeopardy.providers.jservice import JServiceProvider


DEFAULT_LOG_FORMAT = '[%(asctime).19s] [%(name)s] [%(levelname)s] %(message)s'
DEFAULT_LOG_FILE = 'jeopardy.log'


class RobustFileHandler(logging.FileHandler):
    """FileHandler that tolerates flush errors on Windows file handles"""

    def flush(self):
        try:
            super().flush()
        except OSError as e:
            # EINVAL shows up when the handle is in an inconsistent state
            if e.errno != 22:
                raise


def configure_logger(logger,
                     log_file=None,
                     log_format=None,
                     log_level=logging.INFO):
    """Configure a logger with a file or stream handler

    Args:
        logger: Logger instance or logger name string
        log_file: File path string or file-like object (None for stderr)
        log_format: Format string for log messages
        log_level: Logging level (e.g., logging.INFO, logging.DEBUG)

    Returns:
        Configured logger instance
    """
    if isinstance(log_file, str):
        handler = RobustFileHandler(
            log_file,
            mode='a',
            encoding='utf-8',
            errors='replace'
        )
    else:
        handler = logging.StreamHandler(log_file)

    handler.setFormatter(logging.Formatter(log_format or DEFAULT_LOG_FORMAT))

    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    logger.addHandler(handler)
    logger.setLevel(log_level)

    return logger


def parse_log_level(level):
    """Turn 'debug', 'INFO' or 10 into a logging level constant

    Raises:
        ValueError: If the name is not a logging level
    """
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        raise ValueError('Unknown log level: %r' % (level,))
    return value


def load_config(config_file=None):
    """Load configuration from a JSON or YAML file

    Args:
        config_file: Path to the file, or None for an empty config

    Returns:
        Configuration dictionary
    """
    if config_file is None:
        return {}

    with open(config_file, 'r', encoding='utf-8') as fp:
        if config_file.endswith(('.yaml', '.yml')):
            conf = yaml.safe_load(fp)
        else:
            conf = json.load(fp)

    if conf is None:
        return {}
    if not isinstance(conf, dict):
        raise ValueError('Config file %s must contain a mapping' % config_file)
    return conf


def configure_logging(conf, default_file=DEFAULT_LOG_FILE):
    """Set up the root logger from the 'logging' config section

    Args:
        conf: Full configuration dictionary
        default_file: Log file used when the section names none
            (None logs to stderr)

    Returns:
        The configured root logger
    """
    logging_config = conf.get('logging', {}) or {}
    log_level = parse_log_level(logging_config.get('level', 'info'))
    log_file = logging_config.get('file', default_file)
    log_format = logging_config.get('format', DEFAULT_LOG_FORMAT)

    return configure_logger(logging.getLogger(),
                            log_file=log_file,
                            log_format=log_format,
                            log_level=log_level)


def get_config(config_file=None):
    """Load configuration and extract game and provider settings

    Args:
        config_file: Path to a JSON/YAML file; defaults to the first
            command line argument if one was given

    Returns:
        Tuple of (conf, game_config, provider_kwargs) where:
            conf: Full configuration dictionary
            game_config: GameConfig built from the 'game' section
            provider_kwargs: JServiceProvider keyword arguments

    Exits:
        Exits with status 1 if more than one argument is given
    """
    if config_file is None:
        if len(sys.argv) > 2:
            print('usage: %s [config file]' % sys.argv[0], file=sys.stderr)
            sys.exit(1)
        if len(sys.argv) == 2:
            config_file = sys.argv[1]

    conf = load_config(config_file)

    game_config = GameConfig.from_dict(conf.get('game'))

    provider_config = conf.get('provider', {}) or {}
    provider_kwargs = {
        'base_url': provider_config.get('base_url', JServiceProvider.DEFAULT_BASE_URL),
        'timeout': float(provider_config.get('timeout', JServiceProvider.DEFAULT_TIMEOUT)),
    }

    return conf, game_config, provider_kwargs
