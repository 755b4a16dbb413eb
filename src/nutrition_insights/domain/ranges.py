"""Domain models for statistics time ranges."""

from dataclasses import dataclass
from enum import Enum


class RangeMode(str, Enum):
    """Symbolic range selector shown on the statistics screen."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, raw: "RangeMode | str | None") -> "RangeMode":
        """Return the matching mode, falling back to WEEK for unknown values."""
        if isinstance(raw, RangeMode):
            return raw
        if raw is None:
            return cls.WEEK
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.WEEK


@dataclass(frozen=True)
class RangeSelection:
    """Caller-owned range selection; custom bounds are raw ISO date strings."""

    mode: RangeMode | str = RangeMode.WEEK
    custom_start: str = ""
    custom_end: str = ""


@dataclass(frozen=True)
class ResolvedRange:
    """Concrete start/end pair (ISO dates) used to request statistics."""

    start: str
    end: str
