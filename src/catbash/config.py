"""Configuration module.

Loads settings from environment variables. Values are read on every
call, nothing is cached.

Environment Variables
---------------------
CATBASH_INTERPRETER : str
    Interpreter the staged file is piped into (``cat FILE | <interpreter>``).
    Default: bash

CATBASH_TEMP_FILE : str
    Staging path used when only ``--input`` is given. The file is deleted
    after execution.
    Default: temp.txt

CATBASH_LOG_LEVEL : str
    Logging level for catbash diagnostics written to stderr.
    One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    Default: WARNING
"""

import logging
import os
import sys

from catbash.constants import (
    DEFAULT_INTERPRETER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TEMP_FILE,
    LOG_FORMAT,
    VALID_LOG_LEVELS,
)

logger = logging.getLogger(__name__)


def get_interpreter() -> str:
    """Get the interpreter that staged files are piped into.

    Reads from CATBASH_INTERPRETER. Empty or whitespace-only values
    fall back to the default.

    Returns:
        Interpreter command, default is "bash".
    """
    raw = os.environ.get("CATBASH_INTERPRETER", "")
    interpreter = raw.strip()
    if interpreter:
        return interpreter
    return DEFAULT_INTERPRETER


def get_temp_path() -> str:
    """Get the staging path used for input-only runs.

    Returns:
        Path from CATBASH_TEMP_FILE, or "temp.txt" when unset or empty.
    """
    raw = os.environ.get("CATBASH_TEMP_FILE", "")
    path = raw.strip()
    if path:
        return path
    return DEFAULT_TEMP_FILE


def get_log_level() -> str:
    """Get the logging level name.

    Invalid values fall back to the default with a debug message.

    Returns:
        Upper-case level name, default is "WARNING".
    """
    raw = os.environ.get("CATBASH_LOG_LEVEL", "")
    level = raw.strip().upper()
    if level in VALID_LOG_LEVELS:
        return level
    if level:
        logger.debug(
            "Invalid CATBASH_LOG_LEVEL '%s', falling back to '%s'",
            raw,
            DEFAULT_LOG_LEVEL,
        )
    return DEFAULT_LOG_LEVEL


def configure_logging() -> None:
    """Attach a stderr handler to the catbash logger.

    Safe to call more than once: an existing handler is reused and only
    the level is updated.
    """
    package_logger = logging.getLogger("catbash")
    package_logger.setLevel(get_log_level())

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
