"""
Logging Configuration
Log output for the lathframe CLI and desktop application.

Records go to stderr so the design summary printed by the CLI stays clean on
stdout; `--log-file` adds a copy on disk. Matplotlib is only ever as verbose as
WARNING, its font manager floods DEBUG otherwise.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "lathframe"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def parse_log_level(name: str) -> int:
    """'debug' / 'INFO' / ... to the numeric logging level."""
    normalized = name.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{name}', expected one of {', '.join(LOG_LEVELS)}.")
    return getattr(logging, normalized)


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'lathframe' logger namespace.

    Calling it again replaces the previous handlers, so the GUI and the CLI can
    both set it up without duplicating records.

    Args:
        level: Numeric level or one of LOG_LEVELS.
        log_file: Optional path; the file is overwritten on every run.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = parse_log_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging at {logging.getLevelName(level)}" + (f", copy in {log_file}." if log_file else "."))
    return logger
