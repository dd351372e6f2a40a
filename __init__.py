# -*- coding: utf-8 -*-

from core import walk, RunCounters, DirectoryStats, WalkError, DirectoryOpenError
from link_index import InodeLedger, LedgerEntry, RunTotals
from report import Reporter
from logger_utils import get_logger
from dirstat import main, parse_args, compute_totals, UsageError

__all__ = [
    'walk', 'RunCounters', 'DirectoryStats', 'WalkError', 'DirectoryOpenError',
    'InodeLedger', 'LedgerEntry', 'RunTotals', 'Reporter', 'get_logger',
    'main', 'parse_args', 'compute_totals', 'UsageError',
]
