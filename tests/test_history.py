"""Tests for the bounded history ledger."""

from __future__ import annotations

import pytest

from core.domain.models import HistoryEntry
from core.services.history import HISTORY_CAPACITY, HistoryLedger


class TestHistoryLedger:
    def test_starts_empty(self):
        ledger = HistoryLedger()
        assert ledger.entries() == []
        assert len(ledger) == 0
        assert ledger.capacity == HISTORY_CAPACITY == 5

    def test_most_recent_first(self):
        ledger = HistoryLedger()
        first = HistoryEntry.create("one")
        second = HistoryEntry.create("two")
        ledger.record(first)
        ledger.record(second)
        assert ledger.entries() == [second, first]

    def test_sixth_record_evicts_the_first(self):
        ledger = HistoryLedger()
        entries = [HistoryEntry.create(f"value-{i}") for i in range(1, 7)]
        for entry in entries:
            ledger.record(entry)

        listed = ledger.entries()
        assert len(listed) == 5
        assert entries[0] not in listed
        assert [e.value for e in listed] == ["value-6", "value-5", "value-4", "value-3", "value-2"]

    def test_never_exceeds_capacity(self):
        ledger = HistoryLedger()
        for i in range(40):
            ledger.record_value(str(i))
            assert len(ledger) <= 5

    def test_no_deduplication(self):
        ledger = HistoryLedger()
        a = ledger.record_value("same")
        b = ledger.record_value("same")
        assert [e.value for e in ledger.entries()] == ["same", "same"]
        assert a.id != b.id

    def test_entries_is_a_snapshot(self):
        ledger = HistoryLedger()
        ledger.record_value("x")
        snapshot = ledger.entries()
        ledger.record_value("y")
        assert [e.value for e in snapshot] == ["x"]

    def test_iter_and_clear(self):
        ledger = HistoryLedger()
        ledger.record_value("x")
        ledger.record_value("y")
        assert [e.value for e in ledger] == ["y", "x"]
        ledger.clear()
        assert ledger.entries() == []

    def test_entries_are_immutable(self):
        entry = HistoryEntry.create("secret")
        with pytest.raises(Exception):
            entry.value = "changed"  # type: ignore[misc]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            HistoryLedger(capacity=0)
