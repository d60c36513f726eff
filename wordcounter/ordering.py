"""Deduplication and case-insensitive ordering of word lists."""

from __future__ import annotations

from typing import Iterable, List


def dedupe(words: Iterable[str]) -> List[str]:
    """Drop repeated words, keeping the order of first appearance."""
    seen = set()
    unique: List[str] = []
    for word in words:
        if word not in seen:
            seen.add(word)
            unique.append(word)
    return unique


def sort_key(word: str) -> str:
    return word.lower()


def sort_words(words: Iterable[str]) -> List[str]:
    """Sort ascending ignoring case.

    The sort is stable, so spellings that differ only by case keep their
    input order.
    """
    return sorted(words, key=sort_key)


def ordered_words(occurrences: Iterable[str]) -> List[str]:
    """Distinct words from an occurrence list, in report order."""
    return sort_words(dedupe(occurrences))
