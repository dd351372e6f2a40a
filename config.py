# -*- coding: utf-8 -*-
"""
Central configuration for dirstat.
Contains command-line forms, report styles, and the trace log location.
"""

import os

PROG_NAME = "dirstat"

# Command line
RECURSIVE_FLAG = "-r"
DEFAULT_PATH = "."
USAGE = f"Usage: {PROG_NAME} [{RECURSIVE_FLAG}] [<directory>]"
MSG_BAD_PARAMETERS = "Incorrect parameters."
MSG_BAD_PARAMETER_COUNT = "Incorrect number of parameters."

# Pseudo-entries that never count as sub-directories
SELF_ENTRY = "."
PARENT_ENTRY = ".."

# Styles for terminal output (ignored when stdout is not a terminal)
DIRECTORY_STYLE = "bold blue"
OUTSIDE_STYLE = "magenta"
ERROR_STYLE = "red"

# Log file path (should match logger_utils.py)
import getpass
LOG_PATH = os.environ.get("DIRSTAT_LOG_PATH", f"/tmp/dirstat_{getpass.getuser()}.log")
LOG_LEVEL = os.environ.get("DIRSTAT_LOG_LEVEL", "DEBUG").upper()
