from __future__ import annotations

from collections.abc import Iterable

from quickopen.models import SearchResult


def format_result_row(result: SearchResult, *, show_score: bool = False) -> str:
    if show_score:
        return f"{result.score}\t{result.target}"
    return result.target


def read_candidates(lines: Iterable[str]) -> list[str]:
    candidates = []
    for line in lines:
        candidate = line.rstrip("\r\n")
        if candidate:
            candidates.append(candidate)
    return candidates
