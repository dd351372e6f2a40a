import logging
import os
from config import LOG_PATH, LOG_LEVEL, PROG_NAME

def resolve_level(name):
    """Map a level name like "info" to its number; unknown names mean DEBUG."""
    level = logging.getLevelName(str(name).upper())
    if isinstance(level, int):
        return level
    return logging.DEBUG

def get_logger(name=PROG_NAME):
    """
    Return a logger under the dirstat hierarchy.

    The single trace file handler lives on the top-level "dirstat" logger;
    "dirstat.core", "dirstat.cli" and friends reach it through propagation.
    """
    root = logging.getLogger(PROG_NAME)
    if not root.handlers:
        root.setLevel(resolve_level(LOG_LEVEL))
        log_dir = os.path.dirname(LOG_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        # file names need not be valid UTF-8
        handler = logging.FileHandler(LOG_PATH, encoding="utf-8", delay=True, errors="backslashreplace")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.propagate = False
    if name == PROG_NAME:
        return root
    return logging.getLogger(name)
