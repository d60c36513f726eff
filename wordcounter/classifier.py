"""Separator classification for the word tokenizer."""

from __future__ import annotations

from typing import FrozenSet, Iterable


def separator_set(chars: Iterable[str]) -> FrozenSet[str]:
    """Return the set of distinct characters in `chars`."""
    return frozenset(chars)


# Space, comma, period and hyphen; anything else is a word character.
SEPARATORS: FrozenSet[str] = separator_set(" , . - ")


def is_separator(char: str, separators: FrozenSet[str] = SEPARATORS) -> bool:
    """Return True if `char` belongs to the separator set."""
    return char in separators
