#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Inode ledger: tracks hard-linked files seen during a directory walk."""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

@dataclass
class LedgerEntry:
    size: int
    remaining_links: int  # on-disk nlink, minus one per extra link found in the tree
    inode: int

    @property
    def linked_outside(self) -> bool:
        return self.remaining_links > 1


@dataclass
class RunTotals:
    directories: int = 0
    file_links: int = 0
    files: int = 0
    file_space: int = 0
    outside_files: int = 0
    outside_space: int = 0

    def account(self, entry: LedgerEntry) -> None:
        """Ledger visitor: counts one distinct file and its outside links, if any."""
        self.files += 1
        self.file_space += entry.size
        if entry.linked_outside:
            self.outside_files += 1
            self.outside_space += entry.size


class InodeLedger:
    """
    Registry of the distinct inodes found among regular files.

    Every regular file must go through lookup_and_decrement() first, and only
    be inserted when that returns False. Entries are never removed; iteration
    follows insertion order.
    """

    def __init__(self):
        self._entries: Dict[int, LedgerEntry] = {}

    def lookup_and_decrement(self, inode: int) -> bool:
        """
        Record another link to an already known inode.

        Returns:
            True if the inode was known (its remaining link count is decreased),
            False if it was not (nothing changes).
        """
        entry = self._entries.get(inode)
        if entry is None:
            return False
        entry.remaining_links -= 1
        return True

    def insert(self, size: int, link_count: int, inode: int) -> LedgerEntry:
        if inode in self._entries:
            raise ValueError(f"inode {inode} is already in the ledger")
        entry = LedgerEntry(size=size, remaining_links=link_count, inode=inode)
        self._entries[inode] = entry
        return entry

    def for_each(self, visitor: Callable[[LedgerEntry], None]) -> None:
        for entry in self._entries.values():
            visitor(entry)

    def get(self, inode: int) -> Optional[LedgerEntry]:
        return self._entries.get(inode)

    def __contains__(self, inode: int) -> bool:
        return inode in self._entries

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
