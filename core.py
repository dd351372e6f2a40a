#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Core directory walk: per-directory statistics and hard link accounting."""

import os
import stat
from dataclasses import dataclass
from logger_utils import get_logger
from config import PARENT_ENTRY, SELF_ENTRY
from link_index import InodeLedger
from report import Reporter

logger = get_logger("dirstat.core")


class WalkError(Exception):
    """Base class for failures raised by walk()."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryOpenError(WalkError):
    """A directory could not be listed. Already reported when raised."""


class PathConstructionError(WalkError):
    """A child path could not be built. Always fatal for the run."""


@dataclass
class RunCounters:
    directories: int = 0
    file_links: int = 0


@dataclass
class DirectoryStats:
    path: str
    file_links: int = 0
    file_space: int = 0
    subdirectories: int = 0
    subdirectory_space: int = 0


def strip_trailing_separators(path: str) -> str:
    """Drop trailing separators: '/usr/bin///' -> '/usr/bin'."""
    return path.rstrip(os.sep)


def join_child(parent: str, name: str) -> str:
    try:
        return f"{parent}{os.sep}{name}"
    except MemoryError as e:
        raise PathConstructionError(parent, "Memory allocation failed") from e


def walk(path: str, recursive: bool, counters: RunCounters, ledger: InodeLedger,
         reporter: Reporter | None = None) -> DirectoryStats:
    """
    Collect statistics for one directory and, if recursive, for everything below it.

    Every regular file is registered in the ledger (or, when its inode is
    already known, decrements that entry's remaining links). Each visited
    directory is reported as soon as its own entries are done, children first.

    Args:
        path: Directory to list.
        recursive: Descend into sub-directories.
        counters: Run-wide directory and file-link counters, updated in place.
        ledger: Run-wide inode ledger, updated in place.
        reporter: Where reports and diagnostics go.

    Returns:
        The statistics of this directory level only.

    Raises:
        DirectoryOpenError: path could not be listed (after reporting it).
        PathConstructionError: a child path could not be built.
    """
    if reporter is None:
        reporter = Reporter()

    base = strip_trailing_separators(path)
    stats = DirectoryStats(path=base or os.sep)

    try:
        listing = os.scandir(path)
    except OSError as e:
        reason = e.strerror or str(e)
        logger.error(f"Cannot open directory '{path}': {reason}")
        reporter.failure(path, reason)
        raise DirectoryOpenError(path, reason) from e

    logger.debug(f"Walking '{stats.path}' (recursive={recursive})")
    with listing:
        for entry in listing:
            child = join_child(base, entry.name)
            try:
                info = os.lstat(child)
            except OSError as e:
                logger.error(f"Cannot stat '{child}': {e}")
                reporter.failure(child, e.strerror or str(e))
                continue

            if stat.S_ISREG(info.st_mode):
                stats.file_links += 1
                stats.file_space += info.st_size
                if not ledger.lookup_and_decrement(info.st_ino):
                    ledger.insert(info.st_size, info.st_nlink, info.st_ino)
            elif stat.S_ISDIR(info.st_mode) and entry.name not in (SELF_ENTRY, PARENT_ENTRY):
                stats.subdirectories += 1
                stats.subdirectory_space += info.st_size
                if recursive:
                    try:
                        walk(child, recursive, counters, ledger, reporter)
                    except DirectoryOpenError:
                        # reported by the failing call; siblings still count
                        logger.debug(f"Continuing in '{stats.path}' after failed descent into '{child}'")
            else:
                logger.debug(f"Skipping '{child}' (not a regular file or directory)")

    counters.file_links += stats.file_links
    counters.directories += 1

    reporter.directory(stats)
    return stats
