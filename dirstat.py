#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
dirstat: directory statistics with hard link accounting.

Usage: dirstat [-r] [<directory>]

For every directory visited, prints the number of file links and the space
they use, and the number of sub-directories and their own entry size. At the
end it prints grand totals, counting every hard-linked file once, and the
files (and space) that still have links outside the scanned tree.
"""

import sys
from typing import List, Optional, Tuple

from config import (
    DEFAULT_PATH,
    MSG_BAD_PARAMETERS,
    MSG_BAD_PARAMETER_COUNT,
    RECURSIVE_FLAG,
)
from core import DirectoryOpenError, PathConstructionError, RunCounters, walk
from link_index import InodeLedger, RunTotals
from logger_utils import get_logger
from report import Reporter

logger = get_logger("dirstat.cli")


class UsageError(Exception):
    """Malformed command line."""


def parse_args(argv: List[str]) -> Tuple[str, bool]:
    """
    Map the command line (without the program name) to (path, recursive).

    Accepted forms: no arguments, '-r', '<path>', '-r <path>'.
    """
    if not argv:
        return DEFAULT_PATH, False
    if len(argv) == 1:
        if argv[0] == RECURSIVE_FLAG:
            return DEFAULT_PATH, True
        return argv[0], False
    if len(argv) == 2:
        if argv[0] != RECURSIVE_FLAG:
            raise UsageError(MSG_BAD_PARAMETERS)
        return argv[1], True
    raise UsageError(MSG_BAD_PARAMETER_COUNT)


def compute_totals(ledger: InodeLedger, counters: RunCounters) -> RunTotals:
    totals = RunTotals(directories=counters.directories, file_links=counters.file_links)
    ledger.for_each(totals.account)
    return totals


def main(argv: Optional[List[str]] = None, reporter: Optional[Reporter] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if reporter is None:
        reporter = Reporter()

    try:
        path, recursive = parse_args(argv)
    except UsageError as e:
        logger.error(f"Usage error for arguments {argv}: {e}")
        reporter.usage(str(e))
        return 1

    logger.info(f"Starting scan of '{path}' (recursive={recursive})")
    counters = RunCounters()
    ledger = InodeLedger()
    try:
        walk(path, recursive, counters, ledger, reporter)
    except DirectoryOpenError as e:
        logger.error(f"Aborting, start directory unusable: {e}")
        return 1
    except PathConstructionError as e:
        logger.critical(f"Aborting: {e}")
        reporter.failure(e.path, e.reason)
        return 1

    totals = compute_totals(ledger, counters)
    reporter.totals(totals)
    logger.info(
        f"Scan of '{path}' done: {totals.directories} directories, "
        f"{totals.files} files, {totals.outside_files} linked outside"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
