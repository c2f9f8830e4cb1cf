"""
utils.py
Shared utility functions for the goweek package.
"""

import json
import logging

# **********************************
# Constants and parameters
# **********************************

FORMAT = (
    "%(asctime)s - %(name)-10s - %(filename)-18s - %(funcName)-12s - "
    "%(levelname)-8s - %(message)s"
)  # noqa

PACKAGE_LOGGER = "goweek"


# **********************************
# Functions definition
# **********************************


def get_logger(name=None, level=logging.INFO, format=FORMAT):
    """Return the goweek module logger ``name``, attaching a stderr handler once.

    Args:
        name : dotted module name, usually ``__name__``. Empty means the root logger.
        level : initial level for a newly configured logger.
        format : log record format.

    Returns:
        A ``logging.Logger`` that writes diagnostics to stderr, keeping stdout
        free for status lines.

    """
    if not name:
        return logging.getLogger()

    logger = logging.getLogger(name)
    if logger.handlers:
        # already configured by an earlier import
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format))
    logger.addHandler(handler)
    logger.setLevel(level)

    # one handler per module logger; the root would print records twice
    logger.propagate = False
    return logger


def set_log_level(level) -> None:
    """Apply a logging level to every goweek logger created so far.

    Args:
        level : logging level to apply (e.g. logging.DEBUG).

    Returns:
        None

    """
    prefix = PACKAGE_LOGGER + "."
    for name in list(logging.root.manager.loggerDict):
        if name == PACKAGE_LOGGER or name.startswith(prefix):
            logging.getLogger(name).setLevel(level)


def read_json(path):
    """Read JSON from a file and return the parsed object.

    Args:
        path : Path to the JSON file to read.

    Returns:
        The parsed Python object from the JSON file.

    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_text(path) -> str:
    """Read a UTF-8 text file and return its contents.

    Args:
        path : Path to the text file.

    Returns:
        The file contents as a string.

    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
