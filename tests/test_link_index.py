"""Tests for the inode ledger."""

import pytest
from link_index import InodeLedger, LedgerEntry, RunTotals


class TestInodeLedger:
    """Test InodeLedger bookkeeping."""

    def test_unknown_inode_is_not_changed(self):
        ledger = InodeLedger()
        ledger.insert(10, 2, 1)
        assert ledger.lookup_and_decrement(99) is False
        assert 99 not in ledger
        assert ledger.get(1).remaining_links == 2
        assert len(ledger) == 1

    def test_known_inode_is_decremented(self):
        ledger = InodeLedger()
        ledger.insert(10, 3, 42)
        assert ledger.lookup_and_decrement(42) is True
        assert ledger.lookup_and_decrement(42) is True
        assert ledger.get(42).remaining_links == 1

    def test_insert_returns_entry(self):
        ledger = InodeLedger()
        entry = ledger.insert(500, 1, 7)
        assert entry == LedgerEntry(size=500, remaining_links=1, inode=7)

    def test_duplicate_insert_rejected(self):
        ledger = InodeLedger()
        ledger.insert(10, 2, 5)
        with pytest.raises(ValueError):
            ledger.insert(10, 2, 5)
        assert ledger.get(5).remaining_links == 2

    def test_for_each_follows_insertion_order(self):
        ledger = InodeLedger()
        for inode in (30, 10, 20):
            ledger.insert(inode, 1, inode)
        seen = []
        ledger.for_each(lambda entry: seen.append(entry.inode))
        assert seen == [30, 10, 20]
        assert [entry.inode for entry in ledger] == [30, 10, 20]


class TestLedgerEntry:
    """Test outside link detection on a single entry."""

    def test_single_link_is_inside(self):
        assert LedgerEntry(size=1, remaining_links=1, inode=1).linked_outside is False

    def test_remaining_links_mean_outside(self):
        assert LedgerEntry(size=1, remaining_links=2, inode=1).linked_outside is True


class TestRunTotals:
    """Test RunTotals as a ledger visitor."""

    def test_account_counts_distinct_files(self):
        ledger = InodeLedger()
        ledger.insert(100, 1, 1)
        ledger.insert(200, 3, 2)
        ledger.insert(300, 2, 3)
        ledger.lookup_and_decrement(3)

        totals = RunTotals(directories=4, file_links=9)
        ledger.for_each(totals.account)

        assert totals.directories == 4
        assert totals.file_links == 9
        assert totals.files == 3
        assert totals.file_space == 600
        assert totals.outside_files == 1
        assert totals.outside_space == 200

    def test_empty_ledger(self):
        totals = RunTotals()
        InodeLedger().for_each(totals.account)
        assert totals == RunTotals()
