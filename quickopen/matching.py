from __future__ import annotations

from quickopen.models import TokenMatch


def match_token(
    token: str,
    target: str,
    offset: int,
    miss_budget: int,
    *,
    allow_subsequences: bool = True,
) -> TokenMatch | None:
    """Locate ``token`` in ``target`` at or after ``offset``.

    Exact mode finds the first contiguous occurrence. Subsequence mode
    consumes token characters left to right, spending ``miss_budget`` on
    characters that are not found and coalescing adjacent finds into runs.
    Returns ``None`` when the token cannot be placed.
    """
    match = TokenMatch(token_length=len(token))

    if not allow_subsequences:
        index = target.find(token, offset)
        if index == -1:
            return None
        match.add_substring(index, len(token))
        return match

    run_start = -1
    run_length = 0
    cursor = offset
    for char in token:
        index = target.find(char, cursor)
        if index == -1:
            miss_budget -= 1
            if miss_budget < 0:
                return None
            continue

        if run_start != -1 and index == cursor:
            run_length += 1
        else:
            if run_start != -1:
                match.add_substring(run_start, run_length)
            run_start = index
            run_length = 1
        cursor = index + 1

    if run_start != -1:
        match.add_substring(run_start, run_length)

    return match
