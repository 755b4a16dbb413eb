"""Tests for the scan history snapshot."""

from nutrition_insights.domain.scanner import ScanHistoryEntry
from nutrition_insights.services.scan_history import (
    ScanHistorySnapshot,
    scan_history_window,
)


def _entries(*names: str) -> list[ScanHistoryEntry]:
    return [ScanHistoryEntry(product_name=name) for name in names]


def test_current_keeps_provider_order() -> None:
    snapshot = ScanHistorySnapshot(_entries("c", "a", "b"))

    assert [entry.product_name for entry in snapshot.current()] == ["c", "a", "b"]


def test_display_window_takes_first_entries() -> None:
    snapshot = ScanHistorySnapshot(_entries("1", "2", "3", "4", "5", "6", "7"))

    window = scan_history_window(snapshot)

    assert [entry.product_name for entry in window] == ["1", "2", "3", "4", "5"]


def test_display_window_on_short_history_returns_all() -> None:
    snapshot = ScanHistorySnapshot(_entries("1", "2", "3"))

    assert len(snapshot.display_window(5)) == 3
    assert snapshot.display_window(0) == []
    assert snapshot.display_window(-2) == []


def test_replace_discards_previous_snapshot() -> None:
    snapshot = ScanHistorySnapshot(_entries("old-1", "old-2"))
    before = snapshot.current()

    snapshot.replace(_entries("new"))

    assert [entry.product_name for entry in snapshot.current()] == ["new"]
    assert [entry.product_name for entry in before] == ["old-1", "old-2"]
    assert len(snapshot) == 1


def test_current_returns_a_copy() -> None:
    snapshot = ScanHistorySnapshot(_entries("a"))

    snapshot.current().clear()

    assert len(snapshot.current()) == 1


def test_entry_accepts_provider_field_names() -> None:
    entry = ScanHistoryEntry.model_validate(
        {"name": "Hummus", "created_at": "2026-10-15T09:30:00Z"}
    )

    assert entry.product_name == "Hummus"
    assert entry.scanned_at is not None
    assert entry.scanned_at.day == 15
