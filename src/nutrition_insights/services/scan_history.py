"""Session snapshot of the scan history list."""

from collections.abc import Iterable

from nutrition_insights.domain.scanner import ScanHistoryEntry

DEFAULT_WINDOW = 5


class ScanHistorySnapshot:
    """Holds the last fetched scan history, replaced wholesale on refresh.

    The list is kept as a tuple and swapped in a single assignment, so a reader
    sees either the previous or the new history, never a mix.
    """

    _entries: tuple[ScanHistoryEntry, ...]

    def __init__(self, entries: Iterable[ScanHistoryEntry] = ()) -> None:
        self._entries = tuple(entries)

    def current(self) -> list[ScanHistoryEntry]:
        """Return the history in provider order."""
        return list(self._entries)

    def display_window(self, n: int = DEFAULT_WINDOW) -> list[ScanHistoryEntry]:
        """Return the first ``n`` entries."""
        return list(self._entries[: max(n, 0)])

    def replace(self, entries: Iterable[ScanHistoryEntry]) -> None:
        """Install a freshly fetched history."""
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)


def scan_history_window(
    snapshot: ScanHistorySnapshot, n: int = DEFAULT_WINDOW
) -> list[ScanHistoryEntry]:
    """Return the summary window of a snapshot."""
    return snapshot.display_window(n)
