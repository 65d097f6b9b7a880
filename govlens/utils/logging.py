# govlens/utils/logging.py
import logging
from pathlib import Path
from typing import List

LOGGER_NAME = 'govlens'
LOG_FILE_NAME = 'govlens.log'

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s - %(message)s'


def _build_handlers(log_file: Path, console_level: int) -> List[logging.Handler]:
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    return [file_handler, console_handler]


def setup_logging(config_dir: Path, debug: bool = False) -> logging.Logger:
    """
    Route every ``govlens.*`` logger to a log file and the console.

    The file under ``<config_dir>/logs`` always receives DEBUG records; the
    console shows INFO and above unless ``debug`` is set. Calling it again
    replaces the handlers from the previous call.
    """
    log_dir = config_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level = logging.DEBUG if debug else logging.INFO
    for handler in _build_handlers(log_dir / LOG_FILE_NAME, console_level):
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the package logger, e.g. ``govlens.core.searcher``"""
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
