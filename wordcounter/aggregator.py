"""Word counting over a token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List

from wordcounter.classifier import SEPARATORS
from wordcounter.tokenizer import iter_words

logger = logging.getLogger(__name__)


@dataclass
class WordCounts:
    """Count map plus the raw occurrence list it was built from.

    `counts` keys are words exactly as typed (case-sensitive).
    `occurrences` records every word encounter in input order, repeats
    included; use `ordering.dedupe` for the distinct first-seen order.
    """

    counts: Dict[str, int] = field(default_factory=dict)
    occurrences: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def distinct(self) -> int:
        return len(self.counts)

    def accumulate(self, word: str) -> None:
        """Record one encounter of `word`."""
        self.occurrences.append(word)
        if word not in self.counts:
            self.counts[word] = 1
        else:
            self.counts[word] += 1

    def accumulate_line(
        self, line: str, separators: FrozenSet[str] = SEPARATORS
    ) -> None:
        """Tokenize `line` and accumulate its words; separators are dropped."""
        for word in iter_words([line], separators):
            self.accumulate(word)


def count_words(
    lines: Iterable[str], separators: FrozenSet[str] = SEPARATORS
) -> WordCounts:
    """Build a fresh WordCounts from an iterable of lines."""
    result = WordCounts()
    line_count = 0
    for line in lines:
        result.accumulate_line(line, separators)
        line_count += 1
    logger.debug(
        f"Aggregated {result.total} word(s), {result.distinct} distinct, "
        f"from {line_count} line(s)"
    )
    return result
