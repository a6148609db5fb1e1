"""
Small string and sequence helpers.
"""

from typing import Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)


def with_letter_spacing(text: str, spacing: int) -> str:
    """
    Spread the characters of text apart.

    Every character other than a space or newline is followed by
    `spacing + 1` spaces, then the last character of the result is dropped.

        >>> with_letter_spacing("abc", 0)
        'a b c'
    """
    if not text:
        return text
    parts = []
    for ch in text:
        parts.append(ch)
        if ch in (" ", "\n"):
            continue
        parts.append(" " * (spacing + 1))
    return "".join(parts)[:-1]


def excluding_duplicates(items: Iterable[T]) -> List[T]:
    """Return items with duplicates removed, keeping first occurrences in order."""
    return list(dict.fromkeys(items))
