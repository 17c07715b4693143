from __future__ import annotations

from dataclasses import dataclass, field

from quickopen.intervals import Interval, intervals_intersect, merge_intervals


@dataclass(frozen=True)
class Substring:
    start: int
    length: int

    @property
    def interval(self) -> Interval:
        return Interval.from_substring(self.start, self.length)


@dataclass
class TokenMatch:
    token_length: int
    substrings: list[Substring] = field(default_factory=list)
    interval: Interval | None = None
    matched_length: int = 0
    score: int = 0

    @property
    def miss_count(self) -> int:
        return self.token_length - self.matched_length

    def add_substring(self, start: int, length: int) -> None:
        substring = Substring(start, length)
        self.substrings.append(substring)
        self.matched_length += length
        self.interval = merge_intervals(self.interval, substring.interval)

    def intersects(self, interval: Interval | None) -> bool:
        return intervals_intersect(self.interval, interval)


@dataclass
class SearchResult:
    """Accumulated matches of every query token against one target."""

    target: str
    dir_index: int = -1
    score: int = 0
    match_interval: Interval | None = None
    miss_budget: int = 0
    token_matches: list[TokenMatch] = field(default_factory=list)

    def admits(self, match: TokenMatch) -> bool:
        if match.miss_count > self.miss_budget:
            return False

        if match.intersects(self.match_interval):
            # With a single accepted match the cumulative interval is that
            # match, so any overlap is a conflict. With more, the cumulative
            # interval may cover a gap between matches.
            if len(self.token_matches) == 1:
                return False
            for accepted in self.token_matches:
                if accepted.intersects(match.interval):
                    return False

        return True

    def accept(self, match: TokenMatch) -> None:
        self.score += match.score
        self.match_interval = merge_intervals(self.match_interval, match.interval)
        self.miss_budget -= match.miss_count
        self.token_matches.append(match)
