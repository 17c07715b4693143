from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    tokens: tuple[str, ...]
    case_sensitive: bool


def token_sort_key(token: str) -> tuple[int, str]:
    return (-len(token), token)


def fold_case(text: str) -> str:
    """Lowercase ``text`` without shifting character positions.

    Characters whose lowercase form is longer than one character (``"İ"``)
    are kept as they are, so indices into the folded string stay valid
    for the original.
    """
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(
        lowered if len(lowered) == 1 else char
        for char, lowered in ((char, char.lower()) for char in text)
    )


def parse_query(raw_query: str) -> Query:
    tokens = sorted(raw_query.split(), key=token_sort_key)
    return Query(
        tokens=tuple(tokens),
        case_sensitive=fold_case(raw_query) != raw_query,
    )
