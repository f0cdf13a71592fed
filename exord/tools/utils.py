import sys
from os.path import join
from typing import List, Optional, TextIO

from loguru import logger


def parse_values(text: str, separator: str = ",") -> List[str]:
    """Splits a separated string into values, dropping surrounding whitespace and empty entries.
    Args:
        text (str): Separated values (e.g., "low, medium, high").
        separator (str, optional): Value separator. Defaults to ",".
    Returns:
        List[str]: Parsed values (e.g., ["low", "medium", "high"]).
    """
    assert separator, "Separator must not be empty."
    return [value.strip() for value in text.split(separator) if value.strip()]


def read_values(stream: TextIO) -> List[str]:
    """Reads one value per line from a text stream, skipping blank lines."""
    return [line.strip() for line in stream if line.strip()]


def configure_logger(log_dir: Optional[str] = None, verbose: bool = False):
    logger.remove()

    level = "DEBUG" if verbose else "WARNING"
    log_format = "<green>[{time:DD.MM.YYYY at HH:mm:ss}]</green> <level>{level}</level> {message}"

    logger.add(sys.stderr, level=level, colorize=True, format=log_format, backtrace=True, diagnose=True)
    if log_dir:
        logger.add(join(log_dir, "out.log"), level=level, format=log_format, backtrace=True, diagnose=True)

    return logger
