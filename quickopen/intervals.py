from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """Closed range of string indices; ``None`` stands for the empty interval."""

    start: int
    end: int

    @classmethod
    def from_substring(cls, start: int, length: int) -> Interval:
        return cls(start, start + length - 1)


def is_valid_interval(interval: Interval | None) -> bool:
    return interval is not None


def merge_intervals(a: Interval | None, b: Interval | None) -> Interval | None:
    if a is None:
        return b
    if b is None:
        return a
    return Interval(min(a.start, b.start), max(a.end, b.end))


def intervals_intersect(a: Interval | None, b: Interval | None) -> bool:
    # Touching endpoints count as an overlap.
    if a is None or b is None:
        return False
    return a.end >= b.start and a.start <= b.end
