from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from quickopen.log import get_logger
from quickopen.matching import match_token
from quickopen.models import SearchResult, TokenMatch
from quickopen.scoring import requires_case_fold, score_token_match
from quickopen.tokenize import Query, fold_case, parse_query

DEFAULT_MAX_MISSES = 2
DEFAULT_MAX_RESULTS = 100
CULL_CUTOFF = 30.0
CULL_BLEND_FACTOR = 0.1

logger = get_logger(__name__)


def lerp(a: float, b: float, weight: float) -> float:
    return a + (b - a) * weight


def cull_threshold(
    scores: Sequence[float],
    *,
    cutoff: float = CULL_CUTOFF,
    blend: float = CULL_BLEND_FACTOR,
) -> float:
    avg_score = sum(scores) / len(scores)
    return min(cutoff, lerp(avg_score, max(scores), blend))


def result_sort_key(result: SearchResult) -> tuple[int, int, str]:
    return (-result.score, len(result.target), result.target)


def sort_and_filter(
    results: list[SearchResult], max_results: int
) -> tuple[list[SearchResult], float | None]:
    """Drop low scorers, then order and cap what is left.

    Returns the kept results with the cull threshold that was applied, or
    ``None`` when there was nothing to rank.
    """
    if not results:
        return [], None

    threshold = cull_threshold([result.score for result in results])
    kept = [result for result in results if result.score >= threshold]
    if len(kept) > max_results:
        return heapq.nsmallest(max_results, kept, key=result_sort_key), threshold
    return sorted(kept, key=result_sort_key), threshold


class FuzzySearch:
    def __init__(
        self,
        *,
        allow_subsequences: bool = True,
        max_misses: int = DEFAULT_MAX_MISSES,
        start_offset: int = 0,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        for name, value in (
            ("max_misses", max_misses),
            ("start_offset", start_offset),
            ("max_results", max_results),
        ):
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

        self.allow_subsequences = allow_subsequences
        self.max_misses = max_misses
        self.start_offset = start_offset
        self.max_results = max_results
        self._query = parse_query("")

    @property
    def query(self) -> Query:
        return self._query

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._query.tokens

    def set_query(self, raw_query: str) -> None:
        self._query = parse_query(raw_query)
        logger.debug(
            "Query parsed",
            tokens=list(self._query.tokens),
            case_sensitive=self._query.case_sensitive,
        )

    def search(self, target: str) -> SearchResult | None:
        """Match every query token against ``target``.

        Each token keeps the best scoring placement that does not overlap
        placements already accepted for longer tokens. Placements are
        explored greedily from successive start positions, so the combined
        result is not guaranteed to be the best possible one.
        """
        result = SearchResult(
            target=target,
            dir_index=target.rfind("/"),
            miss_budget=self.max_misses,
        )
        adjusted = target if self._query.case_sensitive else fold_case(target)

        for token in self._query.tokens:
            best_match = self._best_token_match(token, target, adjusted, result)
            if best_match is None:
                return None
            result.accept(best_match)

        return result

    def _best_token_match(
        self,
        token: str,
        target: str,
        adjusted: str,
        result: SearchResult,
    ) -> TokenMatch | None:
        best_match: TokenMatch | None = None
        offset = self.start_offset

        while True:
            match = match_token(
                token,
                adjusted,
                offset,
                result.miss_budget,
                allow_subsequences=self.allow_subsequences,
            )
            if match is None:
                break
            if result.admits(match):
                match.score = score_token_match(
                    match,
                    case_folded=requires_case_fold(match, target, adjusted),
                    target=target,
                    dir_index=result.dir_index,
                )
                if best_match is None or best_match.score < match.score:
                    best_match = match
            if match.interval is None:
                break
            offset = match.interval.start + 1

        return best_match

    def search_all(self, targets: Iterable[str]) -> list[SearchResult]:
        matched: list[SearchResult] = []
        target_count = 0
        for target in targets:
            target_count += 1
            result = self.search(target)
            if result is not None:
                matched.append(result)

        results, threshold = sort_and_filter(matched, self.max_results)
        logger.debug(
            "Fuzzy search completed",
            tokens=list(self._query.tokens),
            targets=target_count,
            matched=len(matched),
            cull_score=threshold,
            returned=len(results),
        )
        return results
