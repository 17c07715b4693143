from __future__ import annotations

from quickopen.models import TokenMatch

BOUNDARY_CHARS = "/\\-_."
MISS_PENALTY = 20
CASE_FOLD_PENALTY = 3
WORD_BOUNDARY_BONUS = 4
FULL_TOKEN_BONUS = 100


def is_word_boundary(text: str, index: int) -> bool:
    if index == -1 or index == len(text):
        return True
    return text[index] in BOUNDARY_CHARS


def requires_case_fold(match: TokenMatch, original: str, adjusted: str) -> bool:
    for substring in match.substrings:
        end = substring.start + substring.length
        if original[substring.start : end] != adjusted[substring.start : end]:
            return True
    return False


def score_token_match(
    match: TokenMatch,
    *,
    case_folded: bool,
    target: str,
    dir_index: int,
) -> int:
    """Score a token match; higher scores are better.

    Contiguous runs earn their squared length, doubled inside the final path
    component, plus bonuses for touching a word boundary and for covering the
    whole token in one run. Misses and case folding are penalised.
    """
    score = -MISS_PENALTY * match.miss_count
    if case_folded:
        score -= CASE_FOLD_PENALTY

    for substring in match.substrings:
        substring_score = substring.length * substring.length
        if substring.start > dir_index:
            substring_score *= 2
        if is_word_boundary(target, substring.start - 1) or is_word_boundary(
            target, substring.start + substring.length
        ):
            substring_score += WORD_BOUNDARY_BONUS
        if substring.length == match.token_length:
            substring_score += FULL_TOKEN_BONUS
        score += substring_score

    return score
